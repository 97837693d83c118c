"""Scroll and cursor arithmetic for the content pane and side lists.

Pure functions over integers and ``ListCursor`` values; callers fold the
results back into ``NavigationState``.
"""

from __future__ import annotations

from .state import ListCursor


def max_scroll(total: int, viewport: int) -> int:
    return max(0, total - max(1, viewport))


def clamp_scroll(scroll: int, total: int, viewport: int) -> int:
    return max(0, min(scroll, max_scroll(total, viewport)))


def centered_scroll(target_line: int, total: int, viewport: int) -> int:
    """Scroll offset that puts ``target_line`` mid-viewport, clamped to bounds."""
    return clamp_scroll(target_line - max(1, viewport) // 2, total, viewport)


def clamp_content_cursor(cursor: int, scroll: int, total: int, viewport: int) -> int:
    """Keep the cursor inside the viewport and on an existing line."""
    last_line = max(0, total - 1)
    upper = max(0, min(max(1, viewport) - 1, last_line - scroll))
    return max(0, min(cursor, upper))


def place_content_line(target_line: int, scroll: int, total: int, viewport: int) -> tuple[int, int]:
    """Return ``(scroll, cursor)`` with ``scroll`` clamped and the cursor on ``target_line``."""
    scroll = clamp_scroll(scroll, total, viewport)
    cursor = clamp_content_cursor(target_line - scroll, scroll, total, viewport)
    return scroll, cursor


def content_step_up(scroll: int, cursor: int) -> tuple[int, int]:
    if scroll + cursor <= 0:
        return scroll, cursor
    if cursor > 0:
        return scroll, cursor - 1
    return scroll - 1, cursor


def content_step_down(scroll: int, cursor: int, total: int, viewport: int) -> tuple[int, int]:
    last_line = max(0, total - 1)
    if scroll + cursor >= last_line:
        return scroll, cursor
    if cursor < max(1, viewport) - 1:
        return scroll, cursor + 1
    return scroll + 1, cursor


def content_half_page_up(scroll: int, cursor: int, viewport: int) -> tuple[int, int]:
    half = max(1, max(1, viewport) // 2)
    new_line = max(0, scroll + cursor - half)
    if new_line < scroll:
        return new_line, 0
    return scroll, new_line - scroll


def content_half_page_down(scroll: int, cursor: int, total: int, viewport: int) -> tuple[int, int]:
    viewport = max(1, viewport)
    half = max(1, viewport // 2)
    last_line = max(0, total - 1)
    new_line = min(last_line, scroll + cursor + half)
    if new_line >= scroll + viewport:
        scroll = min(new_line - viewport + 1, max_scroll(total, viewport))
    return scroll, new_line - scroll


def content_bottom(total: int, viewport: int) -> tuple[int, int]:
    scroll = max_scroll(total, viewport)
    return scroll, clamp_content_cursor(max(1, viewport) - 1, scroll, total, viewport)


def follow_cursor(cursor: int, scroll: int, viewport: int) -> int:
    """Adjust ``scroll`` so ``cursor`` stays within the visible window."""
    viewport = max(1, viewport)
    if cursor < scroll:
        return cursor
    if cursor >= scroll + viewport:
        return cursor - viewport + 1
    return scroll


def move_list_cursor(position: ListCursor, delta: int, length: int, viewport: int) -> ListCursor:
    if length <= 0:
        return position
    cursor = max(0, min(length - 1, position.cursor + delta))
    if cursor == position.cursor:
        return position
    return ListCursor(cursor=cursor, scroll=follow_cursor(cursor, position.scroll, viewport))


def list_cursor_at(index: int, position: ListCursor, length: int, viewport: int) -> ListCursor:
    """Select ``index`` (clamped) and scroll it into view."""
    if length <= 0:
        return ListCursor()
    cursor = max(0, min(length - 1, index))
    return ListCursor(cursor=cursor, scroll=follow_cursor(cursor, position.scroll, viewport))


def clamp_list_cursor(position: ListCursor, length: int, viewport: int) -> ListCursor:
    """Re-fit a list position after the list or its viewport changed size."""
    if length <= 0:
        return ListCursor()
    cursor = max(0, min(length - 1, position.cursor))
    scroll = max(0, min(position.scroll, max_scroll(length, viewport)))
    return ListCursor(cursor=cursor, scroll=follow_cursor(cursor, scroll, viewport))
