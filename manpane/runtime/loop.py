"""Interactive event loops for the selection screen and the viewer.

Both loops follow the same shape: pick up terminal resizes, redraw when
the snapshot changed, read one key, and feed it to the reducer. Feature
logic lives in the reducers.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..document import ParsedDocument
from ..errors import SourceUnavailableError
from ..navigation import NavigationState, handle_key, resize
from ..render import render_selection_frame, render_viewer_frame
from ..render.viewer import DEFAULT_SECTIONS_WIDTH, DEFAULT_SIDEBAR_WIDTH
from ..selection import (
    SelectionState,
    apply_search_failure,
    apply_search_results,
    handle_selection_key,
    resize_selection,
)
from ..source import ManualEntry, search_manuals
from ..ui_theme import UITheme
from .keys import is_quit_key, read_key
from .terminal import TerminalController

logger = logging.getLogger(__name__)

KEY_POLL_MS = 120

TerminalSize = Callable[[tuple[int, int]], os.terminal_size]


@dataclass(frozen=True)
class ViewerLayout:
    """Side-pane widths for the viewer frame."""

    sidebar_width: int = DEFAULT_SIDEBAR_WIDTH
    sections_width: int = DEFAULT_SECTIONS_WIDTH


def _next_key(stdin_fd: int) -> str:
    try:
        return read_key(stdin_fd, timeout_ms=KEY_POLL_MS)
    except KeyboardInterrupt:
        return "ctrl+c"


def run_selection_loop(
    selection: SelectionState,
    theme: UITheme,
    terminal: TerminalController,
    stdin_fd: int,
    *,
    search: Callable[[str], Sequence[ManualEntry]] = search_manuals,
    get_terminal_size: TerminalSize = shutil.get_terminal_size,
) -> ManualEntry | None:
    """Run keyword entry and result selection; return the chosen entry.

    Returns ``None`` when the user cancels. Listing searches requested by
    the reducer run synchronously between key events.
    """
    dirty = True
    while not selection.finished:
        term = get_terminal_size((selection.width, selection.height))
        if (term.columns, term.lines) != (selection.width, selection.height):
            selection = resize_selection(selection, term.columns, term.lines)
            dirty = True
        if dirty:
            terminal.draw_frame(render_selection_frame(selection, theme))
            dirty = False

        if selection.pending_query:
            query = selection.pending_query
            logger.debug("searching manual index for %r", query)
            try:
                entries = search(query)
            except SourceUnavailableError as exc:
                selection = apply_search_failure(selection, str(exc))
            else:
                selection = apply_search_results(selection, query, entries)
            dirty = True
            continue

        key = _next_key(stdin_fd)
        if key == "":
            continue
        updated = handle_selection_key(selection, key)
        if updated != selection:
            selection = updated
            dirty = True
    return selection.selected


def run_viewer_loop(
    document: ParsedDocument,
    state: NavigationState,
    title: str,
    theme: UITheme,
    terminal: TerminalController,
    stdin_fd: int,
    *,
    layout: ViewerLayout = ViewerLayout(),
    get_terminal_size: TerminalSize = shutil.get_terminal_size,
) -> NavigationState:
    """Run the viewer until a quit key; return the final snapshot."""
    dirty = True
    while True:
        term = get_terminal_size((state.width, state.height))
        if (term.columns, term.lines) != (state.width, state.height):
            state = resize(state, document, term.columns, term.lines)
            dirty = True
        if dirty:
            terminal.draw_frame(
                render_viewer_frame(
                    document,
                    state,
                    title,
                    theme,
                    sidebar_width=layout.sidebar_width,
                    sections_width=layout.sections_width,
                )
            )
            dirty = False

        key = _next_key(stdin_fd)
        if key == "":
            continue
        if is_quit_key(state, key):
            return state
        updated = handle_key(state, document, key)
        if updated != state:
            state = updated
            dirty = True
