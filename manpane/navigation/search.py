"""Search lifecycle: committing queries, stepping through hits, clearing."""

from __future__ import annotations

from dataclasses import replace

from ..document import (
    ParsedDocument,
    SearchType,
    matching_lines,
    matching_section_indices,
    section_matches,
)
from .state import (
    LineMatches,
    ListCursor,
    MatchSet,
    Mode,
    NavigationState,
    Pane,
    SectionMatches,
    content_viewport_height,
    list_viewport_height,
)
from .viewport import centered_scroll, list_cursor_at, place_content_line


def compute_matches(document: ParsedDocument, query: str, search_type: SearchType) -> MatchSet:
    """Full-text search yields line hits; field-restricted searches yield section hits."""
    if search_type is SearchType.ALL:
        return LineMatches(matching_lines(document.lines, query))
    return SectionMatches(matching_section_indices(document.sections, query, search_type))


def displayed_section_indices(document: ParsedDocument, state: NavigationState) -> tuple[int, ...]:
    """Return the option-list rows for the current search, in document order."""
    if not state.active_query:
        return tuple(range(len(document.sections)))
    if isinstance(state.matches, SectionMatches):
        return state.matches.indices
    if not state.matches:
        return ()
    return tuple(
        idx
        for idx, section in enumerate(document.sections)
        if section_matches(section, state.active_query, SearchType.ALL)
    )


def current_match_line(document: ParsedDocument, state: NavigationState) -> int | None:
    if state.matches is None or state.current_match is None:
        return None
    if isinstance(state.matches, LineMatches):
        return state.matches.lines[state.current_match]
    return document.sections[state.matches.indices[state.current_match]].start_line


def is_line_matching(document: ParsedDocument, state: NavigationState, line: int) -> bool:
    """Return whether ``line`` is a hit or falls inside a matched section."""
    if isinstance(state.matches, LineMatches):
        return line in state.matches.lines
    if isinstance(state.matches, SectionMatches):
        for idx in state.matches.indices:
            section = document.sections[idx]
            if section.start_line <= line <= section.end_line:
                return True
    return False


def center_on_current_match(document: ParsedDocument, state: NavigationState) -> NavigationState:
    target = current_match_line(document, state)
    if target is None:
        return state
    total = document.line_count
    viewport = content_viewport_height(state)
    scroll, cursor = place_content_line(target, centered_scroll(target, total, viewport), total, viewport)
    state = replace(state, content_scroll=scroll, content_cursor=cursor)
    if isinstance(state.matches, SectionMatches):
        # The option list shows exactly the matched sections, so the match
        # position is also the list row.
        option_list = list_cursor_at(
            state.current_match,
            state.option_list,
            len(state.matches),
            list_viewport_height(state),
        )
        state = replace(state, option_list=option_list)
    return state


def clear_search(state: NavigationState) -> NavigationState:
    return replace(
        state,
        active_query="",
        matches=None,
        current_match=None,
        option_list=ListCursor(),
    )


def begin_search(state: NavigationState, search_type: SearchType) -> NavigationState:
    return replace(state, mode=Mode.SEARCH_INPUT, search_type=search_type, search_input="")


def cancel_search_input(state: NavigationState) -> NavigationState:
    return replace(state, mode=Mode.NORMAL, search_input="")


def commit_search(document: ParsedDocument, state: NavigationState) -> NavigationState:
    """Run the buffered query and leave input mode focused on content."""
    query = state.search_input
    state = replace(state, mode=Mode.NORMAL, search_input="", focused_pane=Pane.CONTENT)
    if not query:
        return clear_search(state)
    matches = compute_matches(document, query, state.search_type)
    state = replace(
        state,
        active_query=query,
        matches=matches,
        current_match=0 if len(matches) else None,
        option_list=ListCursor(),
    )
    return center_on_current_match(document, state)


def step_match(document: ParsedDocument, state: NavigationState, direction: int) -> NavigationState:
    """Advance to the next/previous hit with wraparound; no-op without hits."""
    count = state.match_count
    if count == 0 or state.current_match is None:
        return state
    state = replace(
        state,
        current_match=(state.current_match + direction) % count,
        focused_pane=Pane.CONTENT,
    )
    return center_on_current_match(document, state)
