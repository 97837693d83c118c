"""Fetch formatted manual text from ``man`` with overstrike formatting removed."""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess

from ..errors import SourceUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_MAN_WIDTH = 80
# Bold is "c\bc", underline is "_\bc"; keep only the final character.
_OVERSTRIKE_RE = re.compile(r".\x08")
_ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def strip_overstrike(text: str) -> str:
    """Remove backspace overstrikes and SGR escapes, like ``col -b``."""
    text = _OVERSTRIKE_RE.sub("", text)
    return _ANSI_ESCAPE_RE.sub("", text).replace("\x08", "")


def build_man_command(section: str, name: str) -> list[str]:
    cmd = ["man"]
    if section:
        cmd.append(section)
    cmd.append(name)
    return cmd


def fetch_manual(section: str, name: str, width: int = DEFAULT_MAN_WIDTH) -> str:
    """Return the plain-text manual page for ``name`` in ``section``.

    Raises ``SourceUnavailableError`` when ``man`` is missing, fails, or
    produces no output.
    """
    if not name:
        raise SourceUnavailableError("no manual page name given.")
    if shutil.which("man") is None:
        raise SourceUnavailableError("man is not installed.")

    env = dict(os.environ)
    env["MANWIDTH"] = str(max(20, width))
    env["MANPAGER"] = "cat"
    env["PAGER"] = "cat"
    env.pop("MAN_KEEP_FORMATTING", None)
    cmd = build_man_command(section, name)
    logger.debug("fetching manual: %s (MANWIDTH=%s)", " ".join(cmd), env["MANWIDTH"])
    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            env=env,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise SourceUnavailableError(f"failed to run man: {exc}") from exc

    if proc.returncode != 0:
        detail = proc.stderr.strip() or f"man exited with code {proc.returncode}"
        raise SourceUnavailableError(detail)
    text = strip_overstrike(proc.stdout)
    if not text.strip():
        raise SourceUnavailableError(f"no manual entry for {name}")
    logger.info("fetched %s(%s): %d lines", name, section or "?", text.count("\n"))
    return text
