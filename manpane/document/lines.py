"""Immutable line storage with the indentation helpers segmentation relies on."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


def indentation(line: str) -> int:
    """Return the count of leading space and tab characters."""
    return len(line) - len(line.lstrip(" \t"))


def is_blank(line: str) -> bool:
    """Return whether ``line`` holds only whitespace."""
    return not line.strip()


def split_text_lines(text: str) -> list[str]:
    """Split raw manual text on newlines, dropping one trailing terminator."""
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return [line.rstrip("\r") for line in text.split("\n")]


class LineIndex(Sequence[str]):
    """Read-only ordered view over manual text lines."""

    __slots__ = ("_lines",)

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: tuple[str, ...] = tuple(lines)

    @classmethod
    def from_text(cls, text: str) -> LineIndex:
        return cls(split_text_lines(text))

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index):  # type: ignore[override]
        if isinstance(index, slice):
            return LineIndex(self._lines[index])
        return self._lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LineIndex):
            return self._lines == other._lines
        if isinstance(other, (tuple, list)):
            return self._lines == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._lines)

    def __repr__(self) -> str:
        return f"LineIndex({len(self._lines)} lines)"

    def indentation(self, index: int) -> int:
        return indentation(self._lines[index])

    def is_blank(self, index: int) -> bool:
        return is_blank(self._lines[index])

    def next_non_blank(self, start: int) -> int | None:
        """Return the first non-blank line index at or after ``start``."""
        for idx in range(max(0, start), len(self._lines)):
            if not is_blank(self._lines[idx]):
                return idx
        return None
