"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into the named key events
the viewer and selection reducers consume (``"up"``, ``"shift+tab"``,
``"ctrl+d"``, or a single printable character).
"""

from __future__ import annotations

import os
import select

from ..navigation import Mode, NavigationState

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "ctrl+c",
    b"\x04": "ctrl+d",
    b"\x15": "ctrl+u",
    b"\t": "tab",
    b"\r": "enter",
    b"\n": "enter",
    b"\x08": "backspace",
    b"\x7f": "backspace",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "up",
    b"B": "down",
    b"C": "right",
    b"D": "left",
    b"H": "home",
    b"F": "end",
    b"Z": "shift+tab",
}

_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"1": "home",
    b"7": "home",
    b"4": "end",
    b"8": "end",
    b"5": "pgup",
    b"6": "pgdown",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_escape_sequence(fd: int) -> str:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "escape"
    if seq == b"O":
        # SS3 form sent by some terminals in application cursor mode.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "escape"
        return _CSI_FINAL_KEYS.get(final, "escape")
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "escape"

    params = b""
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "escape"
        if b"0" <= part <= b"9" or part == b";":
            params += part
            if len(params) > 16:
                return "escape"
            continue
        if part == b"~":
            return _CSI_TILDE_KEYS.get(params.split(b";")[0], "escape")
        return _CSI_FINAL_KEYS.get(part, "escape")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Block for one key event and return its name.

    Returns ``""`` when ``timeout_ms`` elapses or stdin reaches EOF.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""
        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]
    if ch == b"\x1b":
        return _read_escape_sequence(fd)

    needed = _utf8_length(ch[0]) - 1
    while needed > 0:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        ch += part
        needed -= 1
    return ch.decode("utf-8", errors="replace")


def is_quit_key(state: NavigationState, key: str) -> bool:
    """Return whether ``key`` ends the viewer session in ``state``."""
    if key == "ctrl+c":
        return True
    return key == "q" and state.mode is Mode.NORMAL
