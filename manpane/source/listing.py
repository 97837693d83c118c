"""Manual index search through ``man -k``.

Parses apropos-style output into ``ManualEntry`` rows, honouring a
leading section number (``"1 curl"``) and ranking prefix matches first.
"""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
from dataclasses import dataclass

from ..errors import SourceUnavailableError

logger = logging.getLogger(__name__)

_LISTING_LINE_RE = re.compile(r"^(.*)\(([^)]+)\)\s+-\s+(.*)$")
_LISTING_NAME_RE = re.compile(r"([a-zA-Z0-9_.:+-]+)(?:\(([^)]+)\))?")
_NO_RESULTS_MARKER = "nothing appropriate"


@dataclass(frozen=True)
class ManualEntry:
    name: str
    section_id: str
    description: str

    def label(self) -> str:
        return f"{self.name}({self.section_id}) - {self.description}"


def parse_section_prefix(keyword: str) -> tuple[str, str]:
    """Split ``"3p printf"`` into ``("3p", "printf")``.

    Returns an empty section and the stripped keyword when the input does
    not start with a digit-led token followed by a search term.
    """
    keyword = keyword.strip()
    if not keyword or not keyword[0].isdigit():
        return "", keyword
    section, _sep, term = keyword.partition(" ")
    term = term.strip()
    if not _sep or not term:
        return "", keyword
    return section, term


def parse_listing_output(output: str) -> list[ManualEntry]:
    """Parse ``name(section) - description`` rows, one entry per listed name.

    Rows may list several names (``grep, egrep, fgrep(1) - ...``); names
    without their own section share the row's final section. Duplicate
    ``name(section)`` pairs are dropped.
    """
    entries: list[ManualEntry] = []
    seen: set[tuple[str, str]] = set()
    for raw in output.splitlines():
        line = raw.strip()
        if not line:
            continue
        match = _LISTING_LINE_RE.match(line)
        if match is None:
            continue
        names_text = match.group(1).strip()
        row_section = match.group(2).strip()
        description = match.group(3).strip()
        for name_match in _LISTING_NAME_RE.finditer(names_text):
            name = name_match.group(1).strip()
            section = (name_match.group(2) or row_section).strip()
            key = (name, section)
            if not name or key in seen:
                continue
            seen.add(key)
            entries.append(ManualEntry(name=name, section_id=section, description=description))
    return entries


def sort_entries(entries: list[ManualEntry], keyword: str) -> list[ManualEntry]:
    """Order names starting with ``keyword`` first, then alphabetically."""
    folded = keyword.casefold()
    return sorted(
        entries,
        key=lambda entry: (not entry.name.casefold().startswith(folded), entry.name.casefold()),
    )


def search_manuals(keyword: str) -> list[ManualEntry]:
    """Run ``man -k`` for ``keyword`` and return ranked entries.

    A leading section number filters results in Python rather than with
    ``man -S``, which misses exact names on some platforms.
    Raises ``SourceUnavailableError`` when ``man`` cannot be run.
    """
    section, term = parse_section_prefix(keyword)
    if not term:
        return []
    if shutil.which("man") is None:
        raise SourceUnavailableError("man is not installed.")

    logger.debug("listing manuals for %r (section=%r)", term, section or None)
    try:
        proc = subprocess.run(
            ["man", "-k", term],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise SourceUnavailableError(f"failed to run man -k: {exc}") from exc

    if proc.returncode != 0:
        # man -k exits non-zero when nothing matched.
        if _NO_RESULTS_MARKER in proc.stderr or _NO_RESULTS_MARKER in proc.stdout or not proc.stdout.strip():
            logger.debug("man -k %r: no results (exit %s)", term, proc.returncode)
            return []

    entries = parse_listing_output(proc.stdout)
    if section:
        entries = [entry for entry in entries if entry.section_id == section]
    return sort_entries(entries, term)
