"""Keyword entry and result selection that precede the viewer.

Same snapshot-and-reducer shape as ``manpane.navigation``: every key
produces a new ``SelectionState``. Running the listing search is left to
the caller, which sees ``pending_query`` and reports back through
``apply_search_results`` or ``apply_search_failure``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

from .navigation.state import DEFAULT_HEIGHT, DEFAULT_WIDTH, ListCursor
from .navigation.viewport import clamp_list_cursor, list_cursor_at, move_list_cursor
from .source import ManualEntry

# Title plus blank spacer, and blank spacer plus key hints.
SELECTION_CHROME_ROWS = 4
SELECTION_FALLBACK_ROWS = 10


class SelectionMode(Enum):
    INPUT = "input"
    SELECT = "select"


@dataclass(frozen=True)
class SelectionState:
    mode: SelectionMode = SelectionMode.INPUT
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    input: str = ""
    keyword: str = ""
    entries: tuple[ManualEntry, ...] = ()
    position: ListCursor = ListCursor()
    error: str = ""
    pending_query: str = ""
    selected: ManualEntry | None = None
    cancelled: bool = False

    @property
    def finished(self) -> bool:
        return self.cancelled or self.selected is not None


def selection_viewport_height(state: SelectionState) -> int:
    if state.height <= SELECTION_CHROME_ROWS:
        return SELECTION_FALLBACK_ROWS
    return state.height - SELECTION_CHROME_ROWS


def new_input_selection(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> SelectionState:
    return SelectionState(width=width, height=height)


def new_result_selection(
    keyword: str,
    entries: Sequence[ManualEntry],
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> SelectionState:
    return SelectionState(
        mode=SelectionMode.SELECT,
        width=width,
        height=height,
        input=keyword,
        keyword=keyword,
        entries=tuple(entries),
    )


def resize_selection(state: SelectionState, width: int, height: int) -> SelectionState:
    state = replace(state, width=max(1, width), height=max(1, height))
    return replace(
        state,
        position=clamp_list_cursor(state.position, len(state.entries), selection_viewport_height(state)),
    )


def apply_search_results(state: SelectionState, keyword: str, entries: Sequence[ManualEntry]) -> SelectionState:
    """Switch to the result list, or stay in input with a message when empty."""
    state = replace(state, pending_query="")
    if not entries:
        return replace(state, error=f"No man pages found for: {keyword}")
    return replace(
        state,
        mode=SelectionMode.SELECT,
        keyword=keyword,
        entries=tuple(entries),
        position=ListCursor(),
        error="",
    )


def apply_search_failure(state: SelectionState, message: str) -> SelectionState:
    return replace(state, pending_query="", error=f"Error searching: {message}")


def _handle_input_key(state: SelectionState, key: str) -> SelectionState:
    if key in {"ctrl+c", "escape"}:
        return replace(state, cancelled=True)
    if key == "enter":
        if not state.input.strip():
            return state
        return replace(state, pending_query=state.input)
    if key == "backspace":
        if not state.input:
            return state
        return replace(state, input=state.input[:-1], error="")
    if len(key) == 1 and key.isprintable():
        return replace(state, input=state.input + key, error="")
    return state


def _handle_select_key(state: SelectionState, key: str) -> SelectionState:
    length = len(state.entries)
    viewport = selection_viewport_height(state)
    if key in {"ctrl+c", "q", "escape"}:
        return replace(state, cancelled=True)
    if key in {"up", "k"}:
        return replace(state, position=move_list_cursor(state.position, -1, length, viewport))
    if key in {"down", "j"}:
        return replace(state, position=move_list_cursor(state.position, 1, length, viewport))
    if key in {"home", "g"}:
        return replace(state, position=ListCursor())
    if key in {"end", "G"}:
        return replace(state, position=list_cursor_at(length - 1, state.position, length, viewport))
    if key == "enter":
        if not state.entries:
            return replace(state, cancelled=True)
        return replace(state, selected=state.entries[state.position.cursor])
    return state


def handle_selection_key(state: SelectionState, key: str) -> SelectionState:
    if state.finished:
        return state
    if state.mode is SelectionMode.INPUT:
        return _handle_input_key(state, key)
    return _handle_select_key(state, key)
