"""Tests for pure scroll and list-cursor arithmetic."""

from __future__ import annotations

import unittest

from manpane.navigation import ListCursor
from manpane.navigation.viewport import (
    centered_scroll,
    clamp_content_cursor,
    clamp_list_cursor,
    clamp_scroll,
    content_bottom,
    content_half_page_down,
    content_half_page_up,
    list_cursor_at,
    max_scroll,
    move_list_cursor,
    place_content_line,
)


class ContentViewportTests(unittest.TestCase):
    def test_max_scroll_never_negative(self) -> None:
        self.assertEqual(max_scroll(100, 20), 80)
        self.assertEqual(max_scroll(5, 20), 0)
        self.assertEqual(max_scroll(0, 0), 0)

    def test_clamp_scroll(self) -> None:
        self.assertEqual(clamp_scroll(-4, 100, 20), 0)
        self.assertEqual(clamp_scroll(95, 100, 20), 80)
        self.assertEqual(clamp_scroll(10, 100, 20), 10)

    def test_centered_scroll_targets_half_viewport_above(self) -> None:
        self.assertEqual(centered_scroll(50, 100, 20), 40)
        self.assertEqual(centered_scroll(3, 100, 20), 0)
        self.assertEqual(centered_scroll(99, 100, 20), 80)

    def test_cursor_never_passes_last_line(self) -> None:
        self.assertEqual(clamp_content_cursor(15, 0, 5, 20), 4)
        self.assertEqual(clamp_content_cursor(-1, 0, 50, 20), 0)
        self.assertEqual(clamp_content_cursor(0, 0, 0, 20), 0)

    def test_place_content_line_sets_scroll_and_cursor(self) -> None:
        self.assertEqual(place_content_line(30, 30, 100, 20), (30, 0))
        self.assertEqual(place_content_line(95, 95, 100, 20), (80, 15))

    def test_half_pages_on_short_document(self) -> None:
        self.assertEqual(content_half_page_down(0, 0, 3, 20), (0, 2))
        self.assertEqual(content_half_page_up(0, 2, 20), (0, 0))

    def test_content_bottom_on_short_document(self) -> None:
        self.assertEqual(content_bottom(3, 20), (0, 2))
        self.assertEqual(content_bottom(0, 20), (0, 0))


class ListCursorTests(unittest.TestCase):
    def test_move_scrolls_when_cursor_leaves_window(self) -> None:
        position = ListCursor(cursor=4, scroll=0)
        self.assertEqual(move_list_cursor(position, 1, 10, 5), ListCursor(cursor=5, scroll=1))
        position = ListCursor(cursor=3, scroll=3)
        self.assertEqual(move_list_cursor(position, -1, 10, 5), ListCursor(cursor=2, scroll=2))

    def test_move_on_empty_list_is_a_no_op(self) -> None:
        position = ListCursor()
        self.assertIs(move_list_cursor(position, 1, 0, 5), position)

    def test_list_cursor_at_clamps_index(self) -> None:
        self.assertEqual(list_cursor_at(50, ListCursor(), 10, 4), ListCursor(cursor=9, scroll=6))
        self.assertEqual(list_cursor_at(3, ListCursor(), 0, 4), ListCursor())

    def test_clamp_after_list_shrinks(self) -> None:
        self.assertEqual(clamp_list_cursor(ListCursor(cursor=8, scroll=6), 3, 4), ListCursor(cursor=2, scroll=0))
        self.assertEqual(clamp_list_cursor(ListCursor(cursor=8, scroll=6), 0, 4), ListCursor())


if __name__ == "__main__":
    unittest.main()
