"""Viewer session state as an immutable snapshot.

Every key event produces a fresh ``NavigationState`` through
``dataclasses.replace``; renderers only ever see complete snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..document import SearchType

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24
# Title row, status/command row, and key-hint row.
CHROME_ROWS = 3


class Mode(Enum):
    NORMAL = "normal"
    SEARCH_INPUT = "search_input"
    SECTION_PICKER = "section_picker"
    HELP = "help"


class Pane(Enum):
    """Focusable panes, in cycling order."""

    OPTION_LIST = 0
    CONTENT = 1
    SECTION_LIST = 2

    def cycled(self, step: int) -> Pane:
        members = list(Pane)
        return members[(members.index(self) + step) % len(members)]


@dataclass(frozen=True)
class ListCursor:
    """Selected row and first visible row of a scrollable list."""

    cursor: int = 0
    scroll: int = 0


@dataclass(frozen=True)
class LineMatches:
    """Full-text hits: raw line numbers in document order."""

    lines: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class SectionMatches:
    """Field-restricted hits: option-section indices in document order."""

    indices: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.indices)


MatchSet = Union[LineMatches, SectionMatches]


@dataclass(frozen=True)
class NavigationState:
    mode: Mode = Mode.NORMAL
    focused_pane: Pane = Pane.CONTENT
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    content_scroll: int = 0
    content_cursor: int = 0
    option_list: ListCursor = ListCursor()
    section_list: ListCursor = ListCursor()
    picker: ListCursor = ListCursor()
    search_type: SearchType = SearchType.ALL
    search_input: str = ""
    active_query: str = ""
    matches: MatchSet | None = None
    current_match: int | None = None

    def __post_init__(self) -> None:
        if bool(self.active_query) != (self.matches is not None):
            raise ValueError("matches must be set exactly when a query is active")
        count = len(self.matches) if self.matches is not None else 0
        if count == 0:
            if self.current_match is not None:
                raise ValueError("current_match must be None without matches")
        elif self.current_match is None or not 0 <= self.current_match < count:
            raise ValueError(f"current_match {self.current_match!r} out of range for {count} matches")

    @property
    def content_line(self) -> int:
        """Absolute line number under the content cursor."""
        return self.content_scroll + self.content_cursor

    @property
    def match_count(self) -> int:
        return len(self.matches) if self.matches is not None else 0

    @property
    def search_active(self) -> bool:
        return bool(self.active_query)


def content_viewport_height(state: NavigationState) -> int:
    return max(1, state.height - CHROME_ROWS)


def list_viewport_height(state: NavigationState) -> int:
    """Rows available to the option and section side lists."""
    return content_viewport_height(state)


def picker_viewport_height(state: NavigationState, item_count: int) -> int:
    """Visible rows of the section picker modal (about half the screen)."""
    max_rows = max(5, state.height // 2 - 4)
    return max(1, min(item_count, max_rows))
