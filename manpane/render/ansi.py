"""ANSI-aware width measurement, clipping, and padding for frame rows.

Escape sequences pass through untouched and never count toward width, so
styled rows can be cut and composed by display column.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def _iter_tokens(text: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(token, is_escape)`` pairs: whole escape sequences or single chars."""
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                yield match.group(0), True
                i = match.end()
                continue
        yield text[i], False
        i += 1


def display_width(text: str) -> int:
    col = 0
    for token, is_escape in _iter_tokens(text):
        if not is_escape:
            col += char_display_width(token, col)
    return col


def slice_ansi_line(text: str, start_cols: int, max_cols: int) -> str:
    """Return up to ``max_cols`` display columns starting at ``start_cols``.

    The most recent SGR sequence before the cut is re-emitted so visible
    text keeps its styling. Tabs become spaces.
    """
    if max_cols <= 0 or not text:
        return ""
    start_cols = max(0, start_cols)
    out: list[str] = []
    col = 0
    shown = 0
    pending_sgr = ""
    started = start_cols == 0
    for token, is_escape in _iter_tokens(text):
        if is_escape:
            if token.endswith("m"):
                pending_sgr = token
            if started:
                out.append(token)
            continue
        width = char_display_width(token, col)
        if col + width <= start_cols:
            col += width
            continue
        if not started:
            started = True
            if pending_sgr:
                out.append(pending_sgr)
        if token == "\t":
            spaces = min(width, max_cols - shown)
            out.append(" " * spaces)
            shown += spaces
            col += width
            if shown >= max_cols:
                break
            continue
        if shown + width > max_cols:
            break
        out.append(token)
        shown += width
        col += width
    return "".join(out)


def clip_ansi_line(text: str, max_cols: int) -> str:
    return slice_ansi_line(text, 0, max_cols)


def pad_ansi_line(text: str, width: int, reset: str = "") -> str:
    """Clip ``text`` to ``width`` columns and right-pad it with spaces."""
    clipped = clip_ansi_line(text, width)
    gap = max(0, width - display_width(clipped))
    return f"{clipped}{reset}{' ' * gap}"


def truncate_label(text: str, max_cols: int) -> str:
    """Shorten plain text to ``max_cols`` columns, ending in ``...`` when cut."""
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    if max_cols <= 3:
        return clip_ansi_line(text, max_cols)
    return clip_ansi_line(text, max_cols - 3) + "..."
