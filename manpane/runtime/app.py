"""Session bootstrap: resolve a manual, fetch it, and run the viewer.

Non-interactive sessions (``--nopager`` or stdin not a TTY) print a
plain-text outline of the parsed page instead of opening the TUI.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Sequence

from ..document import ParsedDocument, extract_flag_field
from ..errors import ManpaneError
from ..navigation import new_navigation_state
from ..render.ansi import truncate_label
from ..selection import new_input_selection, new_result_selection
from ..source import DEFAULT_MAN_WIDTH, ManualEntry, fetch_manual, search_manuals
from ..ui_theme import resolve_theme
from .loop import ViewerLayout, run_selection_loop, run_viewer_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)

OUTLINE_SUMMARY_WIDTH = 60


def entry_title(entry: ManualEntry) -> str:
    title = f"{entry.name}({entry.section_id})"
    if entry.description:
        title = f"{title} - {entry.description}"
    return title


def format_outline(document: ParsedDocument, title: str) -> list[str]:
    """Return headings and option flags in document order, one per line."""
    events: list[tuple[int, str]] = [(heading.line_number, heading.title) for heading in document.headings]
    for section in document.sections:
        flag = extract_flag_field(section.flag_text)
        summary = truncate_label(section.body, OUTLINE_SUMMARY_WIDTH)
        row = f"    {flag}  {summary}" if summary else f"    {flag}"
        events.append((section.start_line, row))
    events.sort(key=lambda event: event[0])
    return [title, ""] + [row for _line, row in events]


def _resolve_entry_non_interactive(keyword: str, section: str | None) -> ManualEntry | Sequence[ManualEntry]:
    if not keyword:
        raise ManpaneError("A keyword is required when not running interactively.")
    if section:
        return ManualEntry(name=keyword, section_id=section, description="")
    entries = search_manuals(keyword)
    if not entries:
        raise ManpaneError(f"No man pages found for: {keyword}")
    if len(entries) == 1:
        return entries[0]
    return entries


def _print_rows(rows: Sequence[str]) -> None:
    sys.stdout.write("".join(f"{row}\n" for row in rows))


def _run_non_interactive(keyword: str, section: str | None, man_width: int) -> None:
    resolved = _resolve_entry_non_interactive(keyword, section)
    if not isinstance(resolved, ManualEntry):
        # Several candidates and no way to ask: list them instead.
        _print_rows([entry.label() for entry in resolved])
        return
    text = fetch_manual(resolved.section_id, resolved.name, width=man_width)
    document = ParsedDocument.from_text(text)
    logger.info(
        "parsed %s(%s): %d lines, %d options, %d headings",
        resolved.name,
        resolved.section_id,
        document.line_count,
        len(document.sections),
        len(document.headings),
    )
    _print_rows(format_outline(document, entry_title(resolved)))


def run_session(
    keyword: str,
    section: str | None = None,
    *,
    theme_name: str | None = None,
    no_color: bool = False,
    nopager: bool = False,
    man_width: int = DEFAULT_MAN_WIDTH,
    layout: ViewerLayout = ViewerLayout(),
) -> None:
    """Resolve, fetch, and display one manual page.

    With both ``keyword`` and ``section`` the page is fetched directly;
    with only a keyword the index is searched and a single hit opens
    immediately while several hits open the selection list; with neither
    the keyword is typed first. Source failures propagate as
    ``SourceUnavailableError``.
    """
    keyword = keyword.strip()
    if nopager or not os.isatty(sys.stdin.fileno()):
        _run_non_interactive(keyword, section, man_width)
        return

    theme = resolve_theme(theme_name, no_color=no_color)
    term = shutil.get_terminal_size((80, 24))
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()

    entry: ManualEntry | None = None
    selection = None
    if keyword and section:
        entry = ManualEntry(name=keyword, section_id=section, description="")
    elif keyword:
        entries = search_manuals(keyword)
        if not entries:
            raise ManpaneError(f"No man pages found for: {keyword}")
        if len(entries) == 1:
            entry = entries[0]
        else:
            selection = new_result_selection(keyword, entries, term.columns, term.lines)
    else:
        selection = new_input_selection(term.columns, term.lines)

    terminal = TerminalController(stdin_fd, stdout_fd)
    with terminal.raw_mode():
        if entry is None:
            entry = run_selection_loop(selection, theme, terminal, stdin_fd)
            if entry is None:
                return
        text = fetch_manual(entry.section_id, entry.name, width=man_width)
        document = ParsedDocument.from_text(text)
        logger.info(
            "viewing %s(%s): %d options, %d headings",
            entry.name,
            entry.section_id,
            len(document.sections),
            len(document.headings),
        )
        term = shutil.get_terminal_size((80, 24))
        state = new_navigation_state(document, term.columns, term.lines)
        run_viewer_loop(document, state, entry_title(entry), theme, terminal, stdin_fd, layout=layout)
