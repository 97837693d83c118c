"""Tests for line storage and indentation helpers."""

from __future__ import annotations

import unittest

from manpane.document import LineIndex, indentation, is_blank, split_text_lines


class LineHelperTests(unittest.TestCase):
    def test_indentation_counts_spaces_and_tabs(self) -> None:
        self.assertEqual(indentation("       -r"), 7)
        self.assertEqual(indentation("\t \tx"), 3)
        self.assertEqual(indentation(""), 0)

    def test_is_blank(self) -> None:
        self.assertTrue(is_blank(""))
        self.assertTrue(is_blank(" \t "))
        self.assertFalse(is_blank("  x"))

    def test_split_text_lines_drops_single_trailing_newline(self) -> None:
        self.assertEqual(split_text_lines("a\nb\n"), ["a", "b"])
        self.assertEqual(split_text_lines("a\r\nb\n\n"), ["a", "b", ""])
        self.assertEqual(split_text_lines(""), [])


class LineIndexTests(unittest.TestCase):
    def test_sequence_behaviour(self) -> None:
        index = LineIndex.from_text("NAME\n       ls\n\n")
        self.assertEqual(len(index), 3)
        self.assertEqual(index[1], "       ls")
        self.assertEqual(index, ("NAME", "       ls", ""))
        self.assertIsInstance(index[0:2], LineIndex)

    def test_per_line_helpers(self) -> None:
        index = LineIndex(["", "   ", "    text"])
        self.assertTrue(index.is_blank(1))
        self.assertEqual(index.indentation(2), 4)
        self.assertEqual(index.next_non_blank(0), 2)
        self.assertIsNone(index.next_non_blank(3))


if __name__ == "__main__":
    unittest.main()
