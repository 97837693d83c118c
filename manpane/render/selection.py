"""Frame rendering for keyword entry and manual selection."""

from __future__ import annotations

from ..selection import SelectionMode, SelectionState, selection_viewport_height
from ..ui_theme import UITheme
from .ansi import pad_ansi_line, truncate_label

INPUT_HINTS = "enter search  esc quit"
SELECT_HINTS = "↑/↓ move  enter open  q quit"


def _input_rows(state: SelectionState, width: int, theme: UITheme) -> list[str]:
    rows = [
        pad_ansi_line(f"{theme.title} manpane{theme.reset}", width, theme.reset),
        "",
        pad_ansi_line(f" {theme.prompt}Man page:{theme.reset} {state.input}█", width, theme.reset),
    ]
    if state.pending_query:
        rows.append(pad_ansi_line(f" {theme.pane_hint}Searching for {state.pending_query!r}...{theme.reset}", width, theme.reset))
    elif state.error:
        rows.append(pad_ansi_line(f" {theme.error}{state.error}{theme.reset}", width, theme.reset))
    return rows


def _select_rows(state: SelectionState, width: int, theme: UITheme) -> list[str]:
    count = len(state.entries)
    noun = "page" if count == 1 else "pages"
    rows = [
        pad_ansi_line(f"{theme.title} {count} man {noun} for {state.keyword!r}{theme.reset}", width, theme.reset),
        "",
    ]
    viewport = selection_viewport_height(state)
    end = min(count, state.position.scroll + viewport)
    for idx in range(state.position.scroll, end):
        label = truncate_label(state.entries[idx].label(), max(0, width - 3))
        if idx == state.position.cursor:
            rows.append(f"{theme.selected}{pad_ansi_line(' › ' + label, width)}{theme.reset}")
        else:
            rows.append(pad_ansi_line(f"   {label}", width, theme.reset))
    return rows


def render_selection_frame(state: SelectionState, theme: UITheme) -> list[str]:
    """Return exactly ``state.height`` rows for the selection screen."""
    width = max(1, state.width)
    height = max(1, state.height)
    if state.mode is SelectionMode.INPUT:
        rows = _input_rows(state, width, theme)
        hints = INPUT_HINTS
    else:
        rows = _select_rows(state, width, theme)
        hints = SELECT_HINTS
    rows = [pad_ansi_line(row, width, theme.reset) for row in rows[: max(0, height - 1)]]
    while len(rows) < height - 1:
        rows.append(" " * width)
    rows.append(pad_ansi_line(f"{theme.help_dim} {hints}{theme.reset}", width, theme.reset))
    return rows[:height]
