"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching, and writes whole
frames with a single ``os.write``.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty
from collections.abc import Sequence


class TerminalController:
    """Manage terminal mode transitions and frame output."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor, restore the main screen, and restore tty settings."""
        os.write(self.stdout_fd, b"\x1b[0m\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def draw_frame(self, rows: Sequence[str]) -> None:
        """Repaint the screen from the top-left corner."""
        out = ["\x1b[H"]
        for idx, row in enumerate(rows):
            if idx:
                out.append("\r\n")
            out.append(row)
            out.append("\x1b[0m\x1b[K")
        out.append("\x1b[J")
        os.write(self.stdout_fd, "".join(out).encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
