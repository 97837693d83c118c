"""Behavior tests for the viewer key reducer.

Drives ``handle_key`` with named key events and checks focus, mode,
search, and scroll transitions on a small formatted manual page.
"""

from __future__ import annotations

import unittest
from dataclasses import replace

from manpane.document import ParsedDocument, SearchType
from manpane.navigation import (
    LineMatches,
    ListCursor,
    Mode,
    Pane,
    SectionMatches,
    content_viewport_height,
    handle_key,
    new_navigation_state,
)

CP_PAGE = """\
CP(1)                    User Commands                   CP(1)

NAME
       cp - copy files and directories

SYNOPSIS
       cp [OPTION]... SOURCE DEST

DESCRIPTION
       Copy SOURCE to DEST.

       -a, --archive
              same as -dR --preserve=all

       -f, --force
              if an existing destination file cannot be opened, remove it
              and try again

       -r, -R, --recursive
              copy directories recursively

AUTHOR
       Written by Torbjorn Granlund.
"""


def press(state, document, *keys):
    for key in keys:
        state = handle_key(state, document, key)
    return state


class ViewerKeyTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.document = ParsedDocument.from_text(CP_PAGE)
        # Ten rows leave a seven-line content viewport over 23 lines.
        self.state = new_navigation_state(self.document, 80, 10)

    def press(self, *keys):
        self.state = press(self.state, self.document, *keys)
        return self.state


class FocusTests(ViewerKeyTestCase):
    def test_initial_state(self) -> None:
        self.assertIs(self.state.mode, Mode.NORMAL)
        self.assertIs(self.state.focused_pane, Pane.CONTENT)
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (0, 0))
        self.assertEqual(content_viewport_height(self.state), 7)

    def test_tab_cycles_forward_and_back(self) -> None:
        self.assertIs(self.press("tab").focused_pane, Pane.SECTION_LIST)
        self.assertIs(self.press("tab").focused_pane, Pane.OPTION_LIST)
        self.assertIs(self.press("tab").focused_pane, Pane.CONTENT)
        self.assertIs(self.press("shift+tab").focused_pane, Pane.OPTION_LIST)

    def test_arrow_focus_moves_between_neighbours(self) -> None:
        self.assertIs(self.press("h").focused_pane, Pane.OPTION_LIST)
        self.assertIs(self.press("enter").focused_pane, Pane.CONTENT)
        self.assertIs(self.press("l").focused_pane, Pane.SECTION_LIST)
        self.assertIs(self.press("left").focused_pane, Pane.CONTENT)

    def test_unbound_keys_and_quit_keys_leave_state_unchanged(self) -> None:
        before = self.state
        self.assertEqual(self.press("x", "q", "ctrl+c"), before)


class ContentScrollTests(ViewerKeyTestCase):
    def test_cursor_moves_inside_viewport_before_scrolling(self) -> None:
        self.press(*["j"] * 6)
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (0, 6))
        self.press("j")
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (1, 6))
        self.press(*["k"] * 7)
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (0, 0))
        self.press("up")
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (0, 0))

    def test_half_pages_and_edges(self) -> None:
        self.press("ctrl+d")
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (0, 3))
        self.press("pgdown", "pgdown")
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (3, 6))
        self.press("ctrl+u")
        self.assertEqual(self.state.content_line, 6)
        self.press("end")
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (16, 6))
        self.press("down")
        self.assertEqual(self.state.content_line, 22)
        self.press("home")
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (0, 0))

    def test_scroll_stays_clamped_for_any_key_sequence(self) -> None:
        total = self.document.line_count
        viewport = content_viewport_height(self.state)
        keys = ["j", "pgdown", "end", "k", "ctrl+u", "down", "pgup", "home", "ctrl+d", "end", "up"] * 5
        for key in keys:
            self.press(key)
            self.assertGreaterEqual(self.state.content_scroll, 0)
            self.assertLessEqual(self.state.content_scroll, max(0, total - viewport))
            self.assertLess(self.state.content_cursor, viewport)
            self.assertLess(self.state.content_line, total)


class OptionListTests(ViewerKeyTestCase):
    def test_enter_jumps_to_selected_option(self) -> None:
        self.press("h", "j", "enter")
        self.assertIs(self.state.focused_pane, Pane.CONTENT)
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (14, 0))

    def test_option_cursor_is_bounded_by_displayed_list(self) -> None:
        self.press("h", "j", "j", "j", "j")
        self.assertEqual(self.state.option_list.cursor, 2)
        self.press("home")
        self.assertEqual(self.state.option_list, ListCursor())
        self.press("end")
        self.assertEqual(self.state.option_list.cursor, 2)


class SectionPickerTests(ViewerKeyTestCase):
    def test_picker_without_headings_is_a_no_op(self) -> None:
        document = ParsedDocument.from_lines(["       -v   Verbose output.", "plain text"])
        state = new_navigation_state(document, 80, 10)
        after = handle_key(state, document, "G")
        self.assertIs(after.mode, Mode.NORMAL)
        self.assertEqual(after, state)

    def test_picker_opens_with_reset_cursor_and_closes(self) -> None:
        self.state = replace(self.state, picker=ListCursor(cursor=2, scroll=1))
        self.press("G")
        self.assertIs(self.state.mode, Mode.SECTION_PICKER)
        self.assertEqual(self.state.picker, ListCursor())
        self.assertIs(self.press("escape").mode, Mode.NORMAL)
        self.press("G", "g")
        self.assertIs(self.state.mode, Mode.NORMAL)

    def test_picker_enter_jumps_to_heading(self) -> None:
        self.press("G", "j", "enter")
        self.assertIs(self.state.mode, Mode.NORMAL)
        self.assertIs(self.state.focused_pane, Pane.CONTENT)
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (5, 0))

    def test_picker_jump_near_end_places_cursor_on_heading(self) -> None:
        self.press("G", "end", "l")
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (16, 5))
        self.assertEqual(self.state.content_line, 21)

    def test_section_list_pane_jumps_to_heading(self) -> None:
        self.press("l", "j", "j", "enter")
        self.assertIs(self.state.focused_pane, Pane.CONTENT)
        self.assertEqual(self.state.content_line, 8)


class HelpTests(ViewerKeyTestCase):
    def test_help_swallows_keys_until_closed(self) -> None:
        self.press("?")
        self.assertIs(self.state.mode, Mode.HELP)
        before = self.state
        self.assertEqual(self.press("j", "/"), before)
        self.assertIs(self.press("q").mode, Mode.NORMAL)

    def test_help_closes_with_escape_and_question_mark(self) -> None:
        self.assertIs(self.press("?", "escape").mode, Mode.NORMAL)
        self.assertIs(self.press("?", "?").mode, Mode.NORMAL)


class SearchInputTests(ViewerKeyTestCase):
    def test_search_keys_select_search_type(self) -> None:
        expected = {
            "/": SearchType.ALL,
            "o": SearchType.OPTION_PARTIAL,
            "O": SearchType.OPTION_EXACT,
            "d": SearchType.DESCRIPTION,
        }
        for key, search_type in expected.items():
            state = handle_key(self.state, self.document, key)
            self.assertIs(state.mode, Mode.SEARCH_INPUT)
            self.assertIs(state.search_type, search_type)
            self.assertEqual(state.search_input, "")

    def test_typing_backspace_and_cancel(self) -> None:
        self.press("/", "c", "o", "p", "y", "backspace")
        self.assertEqual(self.state.search_input, "cop")
        self.press("escape")
        self.assertIs(self.state.mode, Mode.NORMAL)
        self.assertEqual(self.state.search_input, "")
        self.assertEqual(self.state.active_query, "")

    def test_cancel_keeps_previous_query(self) -> None:
        self.press("/", *"copy", "enter")
        self.press("/", "x", "escape")
        self.assertEqual(self.state.active_query, "copy")

    def test_commit_full_text_search_centres_first_match(self) -> None:
        self.press("h", "/", *"directories", "enter")
        self.assertIs(self.state.mode, Mode.NORMAL)
        self.assertIs(self.state.focused_pane, Pane.CONTENT)
        self.assertEqual(self.state.matches, LineMatches((3, 19)))
        self.assertEqual(self.state.current_match, 0)
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (0, 3))

    def test_commit_section_search(self) -> None:
        self.press("o", *"force", "enter")
        self.assertEqual(self.state.matches, SectionMatches((1,)))
        self.assertEqual(self.state.option_list, ListCursor())
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (11, 3))

    def test_exact_search_for_dash_r(self) -> None:
        self.press("O", "-", "r", "enter")
        self.assertEqual(self.state.matches, SectionMatches((2,)))

    def test_committing_empty_query_clears_search(self) -> None:
        self.press("/", *"copy", "enter")
        self.press("/", "enter")
        self.assertEqual(self.state.active_query, "")
        self.assertIsNone(self.state.matches)
        self.assertIsNone(self.state.current_match)

    def test_query_without_hits(self) -> None:
        self.press("/", *"zzz", "enter")
        self.assertEqual(self.state.active_query, "zzz")
        self.assertEqual(self.state.match_count, 0)
        self.assertIsNone(self.state.current_match)
        before = self.state
        self.assertEqual(self.press("n", "N"), before)


class MatchStepTests(ViewerKeyTestCase):
    def test_next_and_previous_wrap_around(self) -> None:
        self.press("/", *"directories", "enter")
        self.press("n")
        self.assertEqual(self.state.current_match, 1)
        self.assertEqual((self.state.content_scroll, self.state.content_cursor), (16, 3))
        self.press("n")
        self.assertEqual(self.state.current_match, 0)
        self.press("N")
        self.assertEqual(self.state.current_match, 1)

    def test_stepping_forces_content_focus(self) -> None:
        self.press("/", *"directories", "enter", "l", "n")
        self.assertIs(self.state.focused_pane, Pane.CONTENT)

    def test_section_match_steps_move_option_cursor(self) -> None:
        self.press("d", "e", "enter")
        self.assertEqual(self.state.matches, SectionMatches((0, 1, 2)))
        self.press("n", "n")
        self.assertEqual(self.state.option_list.cursor, 2)
        self.press("n")
        self.assertEqual(self.state.option_list.cursor, 0)

    def test_escape_clears_search_and_option_list(self) -> None:
        self.press("d", "e", "enter", "n")
        self.press("escape")
        self.assertEqual(self.state.active_query, "")
        self.assertIsNone(self.state.matches)
        self.assertEqual(self.state.option_list, ListCursor())


if __name__ == "__main__":
    unittest.main()
