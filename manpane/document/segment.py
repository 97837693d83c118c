"""Indentation-driven segmentation of formatted manual text.

Manual output carries no markup, so option definitions and major headings
are recovered purely from leading whitespace and character classes. The
lead-in (5 to 8 columns) and the +2 continuation step are fixed values
tuned against common ``man`` formatting.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .lines import LineIndex, indentation, is_blank

OPTION_DEFINITION_RE = re.compile(r"^[ \t]{5,8}(?:-\S|--[a-zA-Z][-a-zA-Z0-9]*)")
# Three or more comma-separated long flags is prose referring to options.
CROSS_REFERENCE_LIST_RE = re.compile(r"--\w+,\s+--\w+,\s+--\w+")
HEADING_RE = re.compile(r"[A-Z][A-Z ]*")
PARAGRAPH_INDENT_STEP = 2


@dataclass(frozen=True)
class OptionSection:
    """One option entry: flag header, explanation, and inclusive line span."""

    flag_text: str
    body: str
    start_line: int
    end_line: int


@dataclass(frozen=True)
class HeadingMarker:
    title: str
    line_number: int


def is_option_definition(line: str) -> bool:
    return OPTION_DEFINITION_RE.match(line) is not None


def is_heading(line: str) -> bool:
    """Return whether the trimmed line is an all-uppercase heading."""
    return HEADING_RE.fullmatch(line.strip()) is not None


def split_flag_header(trimmed: str) -> tuple[str, str]:
    """Split a header into flag text and inline explanation at the first double space."""
    idx = trimmed.find("  ")
    if idx < 0:
        return trimmed, ""
    return trimmed[:idx].strip(), trimmed[idx:].strip()


def find_headings(lines: Sequence[str]) -> tuple[HeadingMarker, ...]:
    return tuple(
        HeadingMarker(title=line.strip(), line_number=idx)
        for idx, line in enumerate(lines)
        if is_heading(line)
    )


def _read_section(lines: LineIndex, start: int) -> tuple[OptionSection | None, int]:
    """Collect one section whose header sits at ``start``.

    Returns the section (or ``None`` when the header is rejected) and the
    index where scanning should resume.
    """
    header = lines[start]
    trimmed = header.strip()
    if not trimmed.startswith("-") or CROSS_REFERENCE_LIST_RE.search(trimmed):
        return None, start + 1

    baseline = indentation(header)
    flag_text, inline_text = split_flag_header(trimmed)
    body_parts = [inline_text] if inline_text else []
    if inline_text:
        line_floor = baseline
        paragraph_floor = baseline
    else:
        line_floor = baseline + 1
        paragraph_floor = baseline + PARAGRAPH_INDENT_STEP + 1

    end_line = start
    cursor = start + 1
    body_indent = baseline
    total = len(lines)
    while cursor < total:
        line = lines[cursor]
        if is_blank(line):
            peek = lines.next_non_blank(cursor + 1)
            if peek is None:
                break
            peek_line = lines[peek]
            floor = paragraph_floor
            if inline_text and body_indent > baseline:
                # Once the body column is known, later paragraphs must reach it.
                floor = body_indent
            if (
                indentation(peek_line) >= floor
                and not is_option_definition(peek_line)
                and not is_heading(peek_line)
            ):
                cursor = peek
                continue
            break
        if is_option_definition(line) or is_heading(line):
            break
        if indentation(line) < line_floor:
            break
        body_indent = indentation(line)
        body_parts.append(line.strip())
        end_line = cursor
        cursor += 1

    if not flag_text.startswith("-"):
        return None, cursor
    section = OptionSection(
        flag_text=flag_text,
        body=" ".join(body_parts),
        start_line=start,
        end_line=end_line,
    )
    return section, cursor


def find_option_sections(lines: Sequence[str]) -> tuple[OptionSection, ...]:
    index = lines if isinstance(lines, LineIndex) else LineIndex(lines)
    sections: list[OptionSection] = []
    idx = 0
    while idx < len(index):
        if not is_option_definition(index[idx]):
            idx += 1
            continue
        section, idx = _read_section(index, idx)
        if section is not None:
            sections.append(section)
    return tuple(sections)


def segment(lines: Sequence[str]) -> tuple[tuple[OptionSection, ...], tuple[HeadingMarker, ...]]:
    """Return option sections and heading markers for ``lines``.

    Total and deterministic: unstructured input yields empty tuples.
    """
    index = lines if isinstance(lines, LineIndex) else LineIndex(lines)
    return find_option_sections(index), find_headings(index)


@dataclass(frozen=True)
class ParsedDocument:
    """Manual lines plus the structure recovered from them."""

    lines: LineIndex
    sections: tuple[OptionSection, ...] = ()
    headings: tuple[HeadingMarker, ...] = ()

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> ParsedDocument:
        index = lines if isinstance(lines, LineIndex) else LineIndex(lines)
        sections, headings = segment(index)
        return cls(lines=index, sections=sections, headings=headings)

    @classmethod
    def from_text(cls, text: str) -> ParsedDocument:
        return cls.from_lines(LineIndex.from_text(text))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def heading_index_at(self, line: int) -> int | None:
        """Return the last heading starting at or before ``line`` (the first when none does)."""
        if not self.headings:
            return None
        current = 0
        for idx, heading in enumerate(self.headings):
            if heading.line_number > line:
                break
            current = idx
        return current
