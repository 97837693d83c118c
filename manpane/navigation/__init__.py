"""Viewer navigation: immutable session state and its key-event reducer."""

from __future__ import annotations

from .keys import SEARCH_KEYS, handle_key, is_printable_key, jump_content_to_line
from .search import (
    clear_search,
    commit_search,
    compute_matches,
    current_match_line,
    displayed_section_indices,
    is_line_matching,
    step_match,
)
from .session import current_heading_index, new_navigation_state, resize
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
    picker_viewport_height,
)

__all__ = [
    "SEARCH_KEYS",
    "handle_key",
    "is_printable_key",
    "jump_content_to_line",
    "clear_search",
    "commit_search",
    "compute_matches",
    "current_match_line",
    "displayed_section_indices",
    "is_line_matching",
    "step_match",
    "current_heading_index",
    "new_navigation_state",
    "resize",
    "LineMatches",
    "ListCursor",
    "MatchSet",
    "Mode",
    "NavigationState",
    "Pane",
    "SectionMatches",
    "content_viewport_height",
    "list_viewport_height",
    "picker_viewport_height",
]
