"""Tests for the four search predicates and full-text line matching."""

from __future__ import annotations

import unittest

from manpane.document import (
    OptionSection,
    ParsedDocument,
    SearchType,
    extract_flag_field,
    find_match_spans,
    flag_tokens,
    line_matches,
    matching_lines,
    matching_section_indices,
    section_matches,
)

LOCATION = OptionSection("-L, --location", "Follow redirects when the server reports a new location.", 0, 1)
RECURSIVE = OptionSection("-r, --recursive", "Copy directories recursively. More detail.", 1, 3)
VERBOSE = OptionSection("-v", "Verbose output.", 4, 4)


class FlagFieldTests(unittest.TestCase):
    def test_extract_flag_field_stops_at_double_space(self) -> None:
        self.assertEqual(extract_flag_field("-F      Display a slash"), "-F")
        self.assertEqual(extract_flag_field("-L, --location"), "-L, --location")

    def test_flag_tokens_split_on_commas_and_whitespace(self) -> None:
        self.assertEqual(flag_tokens("-o FILE, --output=FILE"), ["-o", "FILE", "--output=FILE"])
        self.assertEqual(flag_tokens("-r, -R, --recursive"), ["-r", "-R", "--recursive"])


class OptionMatchTests(unittest.TestCase):
    def test_exact_matches_dash_stripped_token(self) -> None:
        self.assertTrue(section_matches(LOCATION, "L", SearchType.OPTION_EXACT))
        self.assertTrue(section_matches(LOCATION, "--location", SearchType.OPTION_EXACT))
        self.assertTrue(section_matches(LOCATION, "location", SearchType.OPTION_EXACT))

    def test_exact_and_partial_differ_on_substrings(self) -> None:
        self.assertFalse(section_matches(LOCATION, "oc", SearchType.OPTION_EXACT))
        self.assertTrue(section_matches(LOCATION, "oc", SearchType.OPTION_PARTIAL))

    def test_exact_is_case_sensitive(self) -> None:
        self.assertFalse(section_matches(LOCATION, "l", SearchType.OPTION_EXACT))
        self.assertTrue(section_matches(LOCATION, "l", SearchType.OPTION_PARTIAL))

    def test_partial_ignores_inline_prose(self) -> None:
        section = OptionSection("-F      Display a slash", "", 0, 0)
        self.assertFalse(section_matches(section, "slash", SearchType.OPTION_PARTIAL))
        self.assertTrue(section_matches(section, "slash", SearchType.ALL))

    def test_exact_dash_query_selects_only_matching_section(self) -> None:
        document = ParsedDocument.from_lines(
            [
                "     DESCRIPTION",
                "       -r, --recursive   Copy directories recursively.",
                "",
                "       More detail.",
                "       -v   Verbose output.",
            ]
        )
        self.assertEqual(matching_section_indices(document.sections, "-r", SearchType.OPTION_EXACT), (0,))


class DescriptionAndAllTests(unittest.TestCase):
    def test_description_searches_body_only(self) -> None:
        self.assertTrue(section_matches(RECURSIVE, "DIRECTORIES", SearchType.DESCRIPTION))
        self.assertFalse(section_matches(RECURSIVE, "--recursive", SearchType.DESCRIPTION))

    def test_all_searches_flags_and_body(self) -> None:
        self.assertTrue(section_matches(RECURSIVE, "--RECURSIVE", SearchType.ALL))
        self.assertTrue(section_matches(RECURSIVE, "more detail", SearchType.ALL))
        self.assertFalse(section_matches(VERBOSE, "recursive", SearchType.ALL))

    def test_empty_query_matches_everything(self) -> None:
        for search_type in SearchType:
            self.assertTrue(section_matches(VERBOSE, "", search_type))

    def test_matching_section_indices_keep_document_order(self) -> None:
        sections = (LOCATION, RECURSIVE, VERBOSE)
        self.assertEqual(matching_section_indices(sections, "o", SearchType.DESCRIPTION), (0, 1, 2))
        self.assertEqual(matching_section_indices(sections, "-v", SearchType.OPTION_PARTIAL), (2,))


class LineMatchTests(unittest.TestCase):
    def test_matching_lines_is_case_insensitive(self) -> None:
        lines = ["NAME", "       grep - print lines", "", "       GREP_COLOR is deprecated"]
        self.assertEqual(matching_lines(lines, "grep"), (1, 3))
        self.assertEqual(matching_lines(lines, "absent"), ())

    def test_line_matches_ignores_case(self) -> None:
        self.assertTrue(line_matches("       GREP_COLOR is deprecated", "grep_color"))
        self.assertFalse(line_matches("       grep - print lines", "egrep"))

    def test_find_match_spans_are_non_overlapping(self) -> None:
        self.assertEqual(find_match_spans("aaaa", "aa"), [(0, 2), (2, 4)])
        self.assertEqual(find_match_spans("Copy COPY copy", "copy"), [(0, 4), (5, 9), (10, 14)])
        self.assertEqual(find_match_spans("text", ""), [])


if __name__ == "__main__":
    unittest.main()
