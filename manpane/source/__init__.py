"""Shims around the ``man`` program: page text and index listings."""

from __future__ import annotations

from .listing import ManualEntry, parse_listing_output, parse_section_prefix, search_manuals, sort_entries
from .manpage import DEFAULT_MAN_WIDTH, build_man_command, fetch_manual, strip_overstrike

__all__ = [
    "ManualEntry",
    "parse_listing_output",
    "parse_section_prefix",
    "search_manuals",
    "sort_entries",
    "DEFAULT_MAN_WIDTH",
    "build_man_command",
    "fetch_manual",
    "strip_overstrike",
]
