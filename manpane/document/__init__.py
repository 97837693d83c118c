"""Manual text model: line storage, segmentation, and query matching."""

from __future__ import annotations

from .lines import LineIndex, indentation, is_blank, split_text_lines
from .matching import (
    SearchType,
    extract_flag_field,
    find_match_spans,
    flag_tokens,
    line_matches,
    matching_lines,
    matching_section_indices,
    section_matches,
)
from .segment import (
    HeadingMarker,
    OptionSection,
    ParsedDocument,
    find_headings,
    find_option_sections,
    is_heading,
    is_option_definition,
    segment,
)

__all__ = [
    "LineIndex",
    "indentation",
    "is_blank",
    "split_text_lines",
    "SearchType",
    "extract_flag_field",
    "find_match_spans",
    "flag_tokens",
    "line_matches",
    "matching_lines",
    "matching_section_indices",
    "section_matches",
    "HeadingMarker",
    "OptionSection",
    "ParsedDocument",
    "find_headings",
    "find_option_sections",
    "is_heading",
    "is_option_definition",
    "segment",
]
