"""Key-event reducer for the viewer.

``handle_key`` maps one named key event and the current snapshot to the
next snapshot. Bindings are grouped per mode and, in normal mode, per
focused pane.
"""

from __future__ import annotations

from dataclasses import replace

from ..document import ParsedDocument, SearchType
from .key_registry import KeyComboBinding, KeyComboRegistry
from .search import (
    begin_search,
    cancel_search_input,
    clear_search,
    commit_search,
    displayed_section_indices,
    step_match,
)
from .state import (
    ListCursor,
    Mode,
    NavigationState,
    Pane,
    content_viewport_height,
    list_viewport_height,
    picker_viewport_height,
)
from .viewport import (
    content_bottom,
    content_half_page_down,
    content_half_page_up,
    content_step_down,
    content_step_up,
    list_cursor_at,
    move_list_cursor,
    place_content_line,
)

SEARCH_KEYS: dict[str, SearchType] = {
    "/": SearchType.ALL,
    "o": SearchType.OPTION_PARTIAL,
    "O": SearchType.OPTION_EXACT,
    "d": SearchType.DESCRIPTION,
}


def jump_content_to_line(state: NavigationState, document: ParsedDocument, line: int) -> NavigationState:
    """Scroll so ``line`` is the top row (clamped) and put the cursor on it."""
    scroll, cursor = place_content_line(
        line,
        line,
        document.line_count,
        content_viewport_height(state),
    )
    return replace(state, content_scroll=scroll, content_cursor=cursor)


# Global ---------------------------------------------------------------------


def _cycle_focus(step: int):
    def handler(state: NavigationState, _document: ParsedDocument) -> NavigationState:
        return replace(state, focused_pane=state.focused_pane.cycled(step))

    return handler


GLOBAL_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("tab",), _cycle_focus(1)),
    KeyComboBinding(("shift+tab",), _cycle_focus(-1)),
)


# Normal mode, any pane ------------------------------------------------------


def _open_search(search_type: SearchType):
    def handler(state: NavigationState, _document: ParsedDocument) -> NavigationState:
        return begin_search(state, search_type)

    return handler


def _clear_search(state: NavigationState, _document: ParsedDocument) -> NavigationState:
    return clear_search(state)


def _next_match(state: NavigationState, document: ParsedDocument) -> NavigationState:
    return step_match(document, state, 1)


def _previous_match(state: NavigationState, document: ParsedDocument) -> NavigationState:
    return step_match(document, state, -1)


def _open_section_picker(state: NavigationState, document: ParsedDocument) -> NavigationState:
    if not document.headings:
        return state
    return replace(state, mode=Mode.SECTION_PICKER, picker=ListCursor())


def _open_help(state: NavigationState, _document: ParsedDocument) -> NavigationState:
    return replace(state, mode=Mode.HELP)


NORMAL_KEYS = KeyComboRegistry().register_bindings(
    *(KeyComboBinding((key,), _open_search(search_type)) for key, search_type in SEARCH_KEYS.items()),
    KeyComboBinding(("escape",), _clear_search),
    KeyComboBinding(("n",), _next_match),
    KeyComboBinding(("N",), _previous_match),
    KeyComboBinding(("G",), _open_section_picker),
    KeyComboBinding(("?",), _open_help),
)


# Option list pane -----------------------------------------------------------


def _move_option_cursor(delta: int | None = None, *, to_end: bool = False):
    def handler(state: NavigationState, document: ParsedDocument) -> NavigationState:
        length = len(displayed_section_indices(document, state))
        viewport = list_viewport_height(state)
        if length == 0:
            return state
        if to_end:
            option_list = list_cursor_at(length - 1, state.option_list, length, viewport)
        elif delta is None:
            option_list = ListCursor()
        else:
            option_list = move_list_cursor(state.option_list, delta, length, viewport)
        return replace(state, option_list=option_list)

    return handler


def _open_selected_option(state: NavigationState, document: ParsedDocument) -> NavigationState:
    displayed = displayed_section_indices(document, state)
    if not displayed:
        return state
    section = document.sections[displayed[min(state.option_list.cursor, len(displayed) - 1)]]
    state = jump_content_to_line(state, document, section.start_line)
    return replace(state, focused_pane=Pane.CONTENT)


OPTION_LIST_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("up", "k"), _move_option_cursor(-1)),
    KeyComboBinding(("down", "j"), _move_option_cursor(1)),
    KeyComboBinding(("home",), _move_option_cursor()),
    KeyComboBinding(("end", "G"), _move_option_cursor(to_end=True)),
    KeyComboBinding(("enter", "right", "l"), _open_selected_option),
)


# Content pane ---------------------------------------------------------------


def _content_motion(motion):
    def handler(state: NavigationState, document: ParsedDocument) -> NavigationState:
        scroll, cursor = motion(
            state.content_scroll,
            state.content_cursor,
            document.line_count,
            content_viewport_height(state),
        )
        return replace(state, content_scroll=scroll, content_cursor=cursor)

    return handler


def _focus(pane: Pane):
    def handler(state: NavigationState, _document: ParsedDocument) -> NavigationState:
        return replace(state, focused_pane=pane)

    return handler


CONTENT_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("up", "k"), _content_motion(lambda s, c, _t, _v: content_step_up(s, c))),
    KeyComboBinding(("down", "j"), _content_motion(content_step_down)),
    KeyComboBinding(("pgup", "ctrl+u"), _content_motion(lambda s, c, _t, v: content_half_page_up(s, c, v))),
    KeyComboBinding(("pgdown", "ctrl+d"), _content_motion(content_half_page_down)),
    KeyComboBinding(("home",), _content_motion(lambda _s, _c, _t, _v: (0, 0))),
    KeyComboBinding(("end", "G"), _content_motion(lambda _s, _c, t, v: content_bottom(t, v))),
    KeyComboBinding(("left", "h"), _focus(Pane.OPTION_LIST)),
    KeyComboBinding(("right", "l"), _focus(Pane.SECTION_LIST)),
)


# Section list pane and picker -----------------------------------------------


def _move_heading_cursor(field_name: str, delta: int | None = None, *, to_end: bool = False):
    """Build a cursor mover for the heading list stored in ``field_name``."""

    def handler(state: NavigationState, document: ParsedDocument) -> NavigationState:
        length = len(document.headings)
        if length == 0:
            return state
        if field_name == "picker":
            viewport = picker_viewport_height(state, length)
        else:
            viewport = list_viewport_height(state)
        position = getattr(state, field_name)
        if to_end:
            position = list_cursor_at(length - 1, position, length, viewport)
        elif delta is None:
            position = ListCursor()
        else:
            position = move_list_cursor(position, delta, length, viewport)
        return replace(state, **{field_name: position})

    return handler


def _jump_to_heading(field_name: str):
    def handler(state: NavigationState, document: ParsedDocument) -> NavigationState:
        if not document.headings:
            return replace(state, mode=Mode.NORMAL)
        position: ListCursor = getattr(state, field_name)
        heading = document.headings[min(position.cursor, len(document.headings) - 1)]
        state = jump_content_to_line(state, document, heading.line_number)
        return replace(state, mode=Mode.NORMAL, focused_pane=Pane.CONTENT)

    return handler


SECTION_LIST_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("up", "k"), _move_heading_cursor("section_list", -1)),
    KeyComboBinding(("down", "j"), _move_heading_cursor("section_list", 1)),
    KeyComboBinding(("home",), _move_heading_cursor("section_list")),
    KeyComboBinding(("end", "G"), _move_heading_cursor("section_list", to_end=True)),
    KeyComboBinding(("enter", "l"), _jump_to_heading("section_list")),
    KeyComboBinding(("left", "h"), _focus(Pane.CONTENT)),
)


def _close_modal(state: NavigationState, _document: ParsedDocument) -> NavigationState:
    return replace(state, mode=Mode.NORMAL)


PICKER_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("escape", "g"), _close_modal),
    KeyComboBinding(("up", "k"), _move_heading_cursor("picker", -1)),
    KeyComboBinding(("down", "j"), _move_heading_cursor("picker", 1)),
    KeyComboBinding(("home",), _move_heading_cursor("picker")),
    KeyComboBinding(("end", "G"), _move_heading_cursor("picker", to_end=True)),
    KeyComboBinding(("enter", "l"), _jump_to_heading("picker")),
)

HELP_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("escape", "?", "q"), _close_modal),
)

PANE_KEYS: dict[Pane, KeyComboRegistry] = {
    Pane.OPTION_LIST: OPTION_LIST_KEYS,
    Pane.CONTENT: CONTENT_KEYS,
    Pane.SECTION_LIST: SECTION_LIST_KEYS,
}


def is_printable_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def _handle_search_input_key(state: NavigationState, document: ParsedDocument, key: str) -> NavigationState:
    if key == "escape":
        return cancel_search_input(state)
    if key == "enter":
        return commit_search(document, state)
    if key == "backspace":
        return replace(state, search_input=state.search_input[:-1])
    if is_printable_key(key):
        return replace(state, search_input=state.search_input + key)
    return state


def handle_key(state: NavigationState, document: ParsedDocument, key: str) -> NavigationState:
    """Return the snapshot that follows ``key``; unbound keys leave it unchanged."""
    result = GLOBAL_KEYS.dispatch(key, state, document)
    if result is not None:
        return result
    if state.mode is Mode.SEARCH_INPUT:
        return _handle_search_input_key(state, document, key)
    if state.mode is Mode.SECTION_PICKER:
        if not document.headings:
            return replace(state, mode=Mode.NORMAL)
        result = PICKER_KEYS.dispatch(key, state, document)
        return state if result is None else result
    if state.mode is Mode.HELP:
        result = HELP_KEYS.dispatch(key, state, document)
        return state if result is None else result

    result = NORMAL_KEYS.dispatch(key, state, document)
    if result is not None:
        return result
    result = PANE_KEYS[state.focused_pane].dispatch(key, state, document)
    return state if result is None else result
