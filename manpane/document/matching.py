"""Query predicates over option sections and raw manual lines.

The four search types are a closed set; ``section_matches`` dispatches on
them directly. All tests are case-insensitive substring checks except
``OPTION_EXACT``, which compares dash-stripped flag tokens exactly.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum

from .segment import OptionSection

_FLAG_TOKEN_SPLIT_RE = re.compile(r"[,\s]+")


class SearchType(Enum):
    ALL = "all"
    OPTION_PARTIAL = "option"
    OPTION_EXACT = "option_exact"
    DESCRIPTION = "description"

    @property
    def label(self) -> str:
        return _SEARCH_TYPE_LABELS[self]


_SEARCH_TYPE_LABELS: dict[SearchType, str] = {
    SearchType.ALL: "all",
    SearchType.OPTION_PARTIAL: "option",
    SearchType.OPTION_EXACT: "option (exact)",
    SearchType.DESCRIPTION: "description",
}


def extract_flag_field(flag_text: str) -> str:
    """Return the flag tokens of a header, dropping trailing inline prose.

    Prose is separated from the flags by two or more spaces, e.g.
    ``"-F      Display a slash"`` -> ``"-F"``.
    """
    idx = flag_text.find("  ")
    if idx < 0:
        return flag_text
    return flag_text[:idx].strip()


def flag_tokens(flag_text: str) -> list[str]:
    """Split the flag field into individual flags, e.g. ``["-r", "--recursive"]``."""
    return [token for token in _FLAG_TOKEN_SPLIT_RE.split(extract_flag_field(flag_text)) if token]


def matches_all(section: OptionSection, query: str) -> bool:
    if not query:
        return True
    folded = query.casefold()
    return folded in section.flag_text.casefold() or folded in section.body.casefold()


def matches_option_partial(section: OptionSection, query: str) -> bool:
    if not query:
        return True
    return query.casefold() in extract_flag_field(section.flag_text).casefold()


def matches_option_exact(section: OptionSection, query: str) -> bool:
    """Compare dash-stripped flag tokens to the dash-stripped query, case-sensitively."""
    if not query:
        return True
    wanted = query.lstrip("-")
    return any(token.lstrip("-") == wanted for token in flag_tokens(section.flag_text))


def matches_description(section: OptionSection, query: str) -> bool:
    if not query:
        return True
    return query.casefold() in section.body.casefold()


def section_matches(section: OptionSection, query: str, search_type: SearchType) -> bool:
    if search_type is SearchType.OPTION_PARTIAL:
        return matches_option_partial(section, query)
    if search_type is SearchType.OPTION_EXACT:
        return matches_option_exact(section, query)
    if search_type is SearchType.DESCRIPTION:
        return matches_description(section, query)
    return matches_all(section, query)


def line_matches(line: str, query: str) -> bool:
    return query.casefold() in line.casefold()


def matching_lines(lines: Sequence[str], query: str) -> tuple[int, ...]:
    """Return line numbers whose raw text contains ``query``."""
    return tuple(idx for idx, line in enumerate(lines) if line_matches(line, query))


def matching_section_indices(
    sections: Sequence[OptionSection],
    query: str,
    search_type: SearchType,
) -> tuple[int, ...]:
    return tuple(
        idx for idx, section in enumerate(sections) if section_matches(section, query, search_type)
    )


def find_match_spans(text: str, query: str) -> list[tuple[int, int]]:
    """Return non-overlapping ``(start, end)`` spans of ``query`` in ``text``."""
    if not text or not query:
        return []
    folded_text = text.casefold()
    folded_query = query.casefold()
    if len(folded_text) != len(text):
        # Offsets must index the original text.
        folded_text = text.lower()
        folded_query = query.lower()
        if len(folded_text) != len(text):
            return []
    spans: list[tuple[int, int]] = []
    cursor = 0
    while True:
        idx = folded_text.find(folded_query, cursor)
        if idx < 0:
            break
        end = idx + len(folded_query)
        spans.append((idx, end))
        cursor = end
    return spans
