"""Tests for match computation, the displayed option list, and stepping."""

from __future__ import annotations

import unittest
from dataclasses import replace

from manpane.document import ParsedDocument, SearchType
from manpane.navigation import (
    LineMatches,
    NavigationState,
    SectionMatches,
    compute_matches,
    current_match_line,
    displayed_section_indices,
    handle_key,
    is_line_matching,
    new_navigation_state,
    step_match,
)

LINES = [
    "NAME",
    "       curl - transfer a URL",
    "",
    "OPTIONS",
    "       -L, --location",
    "              Follow redirects to the new location.",
    "",
    "       -o, --output <file>",
    "              Write output to <file> instead of stdout.",
    "",
    "       -s, --silent",
    "              Silent or quiet mode.",
]


class MatchSetTests(unittest.TestCase):
    def setUp(self) -> None:
        self.document = ParsedDocument.from_lines(LINES)

    def test_full_text_search_returns_line_matches(self) -> None:
        self.assertEqual(compute_matches(self.document, "location", SearchType.ALL), LineMatches((4, 5)))

    def test_field_searches_return_section_matches(self) -> None:
        self.assertEqual(compute_matches(self.document, "o", SearchType.OPTION_PARTIAL), SectionMatches((0, 1)))
        self.assertEqual(compute_matches(self.document, "s", SearchType.OPTION_EXACT), SectionMatches((2,)))
        self.assertEqual(compute_matches(self.document, "file", SearchType.DESCRIPTION), SectionMatches((1,)))

    def test_displayed_sections_follow_search_kind(self) -> None:
        state = new_navigation_state(self.document, 80, 20)
        self.assertEqual(displayed_section_indices(self.document, state), (0, 1, 2))

        section_search = replace(
            state,
            active_query="silent",
            matches=SectionMatches((2,)),
            current_match=0,
        )
        self.assertEqual(displayed_section_indices(self.document, section_search), (2,))

        line_search = replace(
            state,
            active_query="output",
            matches=compute_matches(self.document, "output", SearchType.ALL),
            current_match=0,
        )
        self.assertEqual(displayed_section_indices(self.document, line_search), (1,))

    def test_full_text_search_without_line_hits_shows_no_sections(self) -> None:
        document = ParsedDocument.from_lines(
            [
                "       -r, --recursive   Copy directories recursively.",
                "",
                "       More detail.",
            ]
        )
        state = new_navigation_state(document, 80, 20)
        for key in "/recursively. more":
            state = handle_key(state, document, key)
        state = handle_key(state, document, "enter")
        self.assertEqual(state.match_count, 0)
        self.assertEqual(displayed_section_indices(document, state), ())


class MatchLineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.document = ParsedDocument.from_lines(LINES)
        self.state = new_navigation_state(self.document, 80, 8)

    def test_section_match_line_is_section_start(self) -> None:
        state = replace(self.state, active_query="o", matches=SectionMatches((0, 1)), current_match=1)
        self.assertEqual(current_match_line(self.document, state), 7)
        self.assertTrue(is_line_matching(self.document, state, 8))
        self.assertFalse(is_line_matching(self.document, state, 10))

    def test_no_search_has_no_match_line(self) -> None:
        self.assertIsNone(current_match_line(self.document, self.state))
        self.assertFalse(is_line_matching(self.document, self.state, 0))


class StepMatchTests(unittest.TestCase):
    def setUp(self) -> None:
        self.document = ParsedDocument.from_lines(LINES)
        base = new_navigation_state(self.document, 80, 8)
        self.state = replace(base, active_query="o", matches=LineMatches((1, 4, 7)), current_match=2)

    def test_next_from_last_wraps_to_first(self) -> None:
        self.assertEqual(step_match(self.document, self.state, 1).current_match, 0)

    def test_previous_from_first_wraps_to_last(self) -> None:
        state = replace(self.state, current_match=0)
        self.assertEqual(step_match(self.document, state, -1).current_match, 2)

    def test_step_without_matches_is_a_no_op(self) -> None:
        state = replace(self.state, active_query="zz", matches=LineMatches(()), current_match=None)
        self.assertIs(step_match(self.document, state, 1), state)
        self.assertIs(step_match(self.document, state, -1), state)


class SnapshotInvariantTests(unittest.TestCase):
    def test_matches_require_a_query(self) -> None:
        with self.assertRaises(ValueError):
            NavigationState(matches=LineMatches((1,)), current_match=0)

    def test_query_requires_matches(self) -> None:
        with self.assertRaises(ValueError):
            NavigationState(active_query="x")

    def test_current_match_must_be_in_range(self) -> None:
        with self.assertRaises(ValueError):
            NavigationState(active_query="x", matches=LineMatches((1, 2)), current_match=2)
        with self.assertRaises(ValueError):
            NavigationState(active_query="x", matches=LineMatches(()), current_match=0)


if __name__ == "__main__":
    unittest.main()
