"""Frame rendering for the three-pane manual viewer.

Reads a ``ParsedDocument`` and a ``NavigationState`` and returns exactly
``state.height`` rows of ANSI text. Every offset it reads is already
clamped by the navigation layer.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..document import ParsedDocument, extract_flag_field, find_match_spans
from ..navigation import (
    Mode,
    NavigationState,
    Pane,
    SectionMatches,
    content_viewport_height,
    current_heading_index,
    current_match_line,
    displayed_section_indices,
    is_line_matching,
    picker_viewport_height,
)
from ..ui_theme import UITheme
from .ansi import pad_ansi_line, truncate_label
from .help import HELP_FOOTER, HELP_MODAL_WIDTH, help_body_rows, key_hint_row
from .modal import build_modal_box, overlay_modal

DEFAULT_SIDEBAR_WIDTH = 30
DEFAULT_SECTIONS_WIDTH = 22
MIN_CONTENT_WIDTH = 20
PICKER_MODAL_WIDTH = 40


@dataclass(frozen=True)
class PaneWidths:
    sidebar: int
    content: int
    sections: int


def compute_pane_widths(
    width: int,
    sidebar_width: int = DEFAULT_SIDEBAR_WIDTH,
    sections_width: int = DEFAULT_SECTIONS_WIDTH,
) -> PaneWidths:
    """Split ``width`` into sidebar, content, and sections columns plus two dividers.

    Side panes shrink (down to zero) before the content pane drops below
    ``MIN_CONTENT_WIDTH``.
    """
    available = max(0, width - 2)
    sidebar = max(0, sidebar_width)
    sections = max(0, sections_width)
    overflow = sidebar + sections + MIN_CONTENT_WIDTH - available
    if overflow > 0:
        shrink_sections = min(sections, (overflow + 1) // 2)
        sections -= shrink_sections
        overflow -= shrink_sections
        sidebar -= min(sidebar, overflow)
        sidebar = max(0, sidebar)
    content = max(1, available - sidebar - sections)
    return PaneWidths(sidebar=sidebar, content=content, sections=sections)


def scroll_percent(scroll: int, total: int, viewport: int) -> int:
    max_scroll = max(0, total - max(1, viewport))
    if max_scroll <= 0:
        return 100
    return min(100, scroll * 100 // max_scroll)


def _highlight_line(line: str, query: str, theme: UITheme, current: bool, restore: str = "") -> str:
    spans = find_match_spans(line, query)
    if not spans:
        return line
    style = theme.search_current if current else theme.search_hit
    out: list[str] = []
    cursor = 0
    for start, end in spans:
        out.append(line[cursor:start])
        out.append(f"{style}{line[start:end]}{theme.reset}{restore}")
        cursor = end
    out.append(line[cursor:])
    return "".join(out)


def _row_style(theme: UITheme, focused: bool) -> str:
    return theme.selected if focused else theme.selected_unfocused


def render_option_rows(document: ParsedDocument, state: NavigationState, width: int, theme: UITheme) -> list[str]:
    rows_needed = content_viewport_height(state)
    if width <= 0:
        return [""] * rows_needed
    displayed = displayed_section_indices(document, state)
    focused = state.focused_pane is Pane.OPTION_LIST
    rows: list[str] = []
    if not displayed:
        hint = "No matching options" if state.active_query else "No options found"
        rows.append(pad_ansi_line(f"{theme.pane_hint}{hint}{theme.reset}", width, theme.reset))
    for row_idx in range(state.option_list.scroll, len(displayed)):
        if len(rows) >= rows_needed:
            break
        section = document.sections[displayed[row_idx]]
        label = truncate_label(extract_flag_field(section.flag_text), width - 1)
        if row_idx == state.option_list.cursor:
            rows.append(f"{_row_style(theme, focused)}{pad_ansi_line(' ' + label, width)}{theme.reset}")
        else:
            rows.append(pad_ansi_line(f" {theme.option_flag}{label}{theme.reset}", width, theme.reset))
    while len(rows) < rows_needed:
        rows.append(" " * width)
    return rows


def render_content_rows(document: ParsedDocument, state: NavigationState, width: int, theme: UITheme) -> list[str]:
    """Render visible manual lines with a one-column match gutter."""
    rows_needed = content_viewport_height(state)
    text_width = max(0, width - 1)
    focused = state.focused_pane is Pane.CONTENT
    match_line = current_match_line(document, state)
    highlight_query = state.active_query if not isinstance(state.matches, SectionMatches) else ""
    heading_lines = {heading.line_number for heading in document.headings}
    rows: list[str] = []
    for offset in range(rows_needed):
        line_no = state.content_scroll + offset
        if line_no >= document.line_count:
            rows.append(" " * width)
            continue
        text = document.lines[line_no].replace("\t", "    ")
        if line_no == match_line:
            gutter = f"{theme.match_gutter}▶{theme.reset}"
        elif state.active_query and is_line_matching(document, state, line_no):
            gutter = f"{theme.match_gutter}▏{theme.reset}"
        else:
            gutter = " "
        row_style = theme.reverse if focused and offset == state.content_cursor else ""
        if highlight_query:
            text = _highlight_line(text, highlight_query, theme, line_no == match_line, restore=row_style)
        elif line_no in heading_lines:
            text = f"{theme.heading_line}{text}{theme.reset}{row_style}"
        if row_style:
            body = f"{row_style}{pad_ansi_line(text, text_width)}{theme.reset}"
        else:
            body = pad_ansi_line(text, text_width, theme.reset)
        rows.append(f"{gutter}{body}")
    return rows


def render_section_rows(document: ParsedDocument, state: NavigationState, width: int, theme: UITheme) -> list[str]:
    rows_needed = content_viewport_height(state)
    if width <= 0:
        return [""] * rows_needed
    focused = state.focused_pane is Pane.SECTION_LIST
    active = current_heading_index(document, state)
    rows: list[str] = []
    if not document.headings:
        rows.append(pad_ansi_line(f"{theme.pane_hint}No sections{theme.reset}", width, theme.reset))
    for row_idx in range(state.section_list.scroll, len(document.headings)):
        if len(rows) >= rows_needed:
            break
        marker = "●" if row_idx == active else " "
        label = truncate_label(document.headings[row_idx].title, width - 2)
        if focused and row_idx == state.section_list.cursor:
            rows.append(f"{theme.selected}{pad_ansi_line(f'{marker} {label}', width)}{theme.reset}")
        elif row_idx == active:
            rows.append(pad_ansi_line(f"{theme.active_heading}{marker} {label}{theme.reset}", width, theme.reset))
        else:
            rows.append(pad_ansi_line(f"{marker} {label}", width, theme.reset))
    while len(rows) < rows_needed:
        rows.append(" " * width)
    return rows


def render_status_row(state: NavigationState, width: int, theme: UITheme) -> str:
    if state.mode is Mode.SEARCH_INPUT:
        prompt = f"{theme.prompt}Search {state.search_type.label}:{theme.reset} {state.search_input}█"
        return pad_ansi_line(prompt, width, theme.reset)
    if state.active_query:
        if state.match_count and state.current_match is not None:
            summary = f"match {state.current_match + 1}/{state.match_count}"
        else:
            summary = "no matches"
        text = f"{theme.status}[{state.search_type.label}] {state.active_query!r}: {summary}  (esc clears){theme.reset}"
        return pad_ansi_line(text, width, theme.reset)
    return " " * width


def render_title_row(document: ParsedDocument, state: NavigationState, title: str, width: int, theme: UITheme) -> str:
    percent = scroll_percent(state.content_scroll, document.line_count, content_viewport_height(state))
    right = f"{len(document.sections)} options  {percent:3d}% "
    left = truncate_label(f" {title}", max(0, width - len(right) - 1))
    gap = max(1, width - len(left) - len(right))
    return pad_ansi_line(f"{theme.title}{left}{theme.reset}{' ' * gap}{theme.pane_hint}{right}{theme.reset}", width, theme.reset)


def render_picker_modal(document: ParsedDocument, state: NavigationState, theme: UITheme, width: int) -> list[str]:
    inner_width = max(10, min(PICKER_MODAL_WIDTH, width - 4))
    viewport = picker_viewport_height(state, len(document.headings))
    body: list[str] = []
    end = min(len(document.headings), state.picker.scroll + viewport)
    for idx in range(state.picker.scroll, end):
        label = truncate_label(document.headings[idx].title, inner_width - 2)
        if idx == state.picker.cursor:
            body.append(f"{theme.selected}{pad_ansi_line(' ' + label, inner_width)}{theme.reset}")
        else:
            body.append(f" {label}")
    return build_modal_box("Sections", body, inner_width, theme, footer="enter jump  esc close")


def render_help_modal(theme: UITheme, width: int) -> list[str]:
    inner_width = max(10, min(HELP_MODAL_WIDTH, width - 4))
    return build_modal_box("Keyboard Shortcuts", help_body_rows(theme), inner_width, theme, footer=HELP_FOOTER)


def render_viewer_frame(
    document: ParsedDocument,
    state: NavigationState,
    title: str,
    theme: UITheme,
    *,
    sidebar_width: int = DEFAULT_SIDEBAR_WIDTH,
    sections_width: int = DEFAULT_SECTIONS_WIDTH,
) -> list[str]:
    """Compose the full viewer frame, including any modal overlay."""
    width = max(1, state.width)
    widths = compute_pane_widths(width, sidebar_width, sections_width)
    divider = f"{theme.divider}│{theme.reset}"

    option_rows = render_option_rows(document, state, widths.sidebar, theme)
    content_rows = render_content_rows(document, state, widths.content, theme)
    section_rows = render_section_rows(document, state, widths.sections, theme)

    rows = [render_title_row(document, state, title, width, theme)]
    for option_row, content_row, section_row in zip(option_rows, content_rows, section_rows):
        rows.append(f"{option_row}{divider}{content_row}{divider}{section_row}")
    rows.append(render_status_row(state, width, theme))
    rows.append(pad_ansi_line(key_hint_row(theme), width, theme.reset))

    if state.mode is Mode.SECTION_PICKER and document.headings:
        rows = overlay_modal(rows, render_picker_modal(document, state, theme, width), width, theme.reset)
    elif state.mode is Mode.HELP:
        rows = overlay_modal(rows, render_help_modal(theme, width), width, theme.reset)
    return rows[: max(1, state.height)]
