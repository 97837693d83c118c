"""Session construction and terminal-size changes."""

from __future__ import annotations

from dataclasses import replace

from ..document import ParsedDocument
from .search import displayed_section_indices
from .state import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    NavigationState,
    content_viewport_height,
    list_viewport_height,
    picker_viewport_height,
)
from .viewport import clamp_content_cursor, clamp_list_cursor, clamp_scroll


def new_navigation_state(
    document: ParsedDocument,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> NavigationState:
    """Return the initial snapshot for ``document``: normal mode, content focused."""
    return resize(NavigationState(), document, width, height)


def resize(state: NavigationState, document: ParsedDocument, width: int, height: int) -> NavigationState:
    """Apply a terminal size and re-clamp every cursor and scroll offset."""
    state = replace(state, width=max(1, width), height=max(1, height))
    total = document.line_count
    viewport = content_viewport_height(state)
    line = state.content_line
    scroll = clamp_scroll(state.content_scroll, total, viewport)
    cursor = clamp_content_cursor(line - scroll, scroll, total, viewport)
    if scroll + cursor != line and total:
        # Keep the previously selected line visible when the viewport shrank.
        target = min(line, total - 1)
        if target >= scroll + viewport:
            scroll = clamp_scroll(target - viewport + 1, total, viewport)
        cursor = clamp_content_cursor(target - scroll, scroll, total, viewport)

    heading_count = len(document.headings)
    return replace(
        state,
        content_scroll=scroll,
        content_cursor=cursor,
        option_list=clamp_list_cursor(
            state.option_list,
            len(displayed_section_indices(document, state)),
            list_viewport_height(state),
        ),
        section_list=clamp_list_cursor(state.section_list, heading_count, list_viewport_height(state)),
        picker=clamp_list_cursor(state.picker, heading_count, picker_viewport_height(state, heading_count)),
    )


def current_heading_index(document: ParsedDocument, state: NavigationState) -> int | None:
    """Index of the heading whose block contains the content cursor."""
    return document.heading_index_at(state.content_line)
