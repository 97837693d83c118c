"""Exception types shared by the source shims and the CLI."""

from __future__ import annotations


class ManpaneError(Exception):
    """Base class for manpane failures."""


class SourceUnavailableError(ManpaneError):
    """Raised when ``man`` cannot produce a listing or a manual page."""
