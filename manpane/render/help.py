"""Keyboard shortcut reference shown in the help modal and the hint row."""

from __future__ import annotations

from ..ui_theme import UITheme

HELP_SHORTCUTS: tuple[tuple[str, str], ...] = (
    ("Navigation", ""),
    ("↑/k, ↓/j", "Move up/down"),
    ("←/h, →/l", "Switch panes"),
    ("tab", "Cycle panes forward"),
    ("shift+tab", "Cycle panes backward"),
    ("pgup/ctrl+u", "Half page up"),
    ("pgdown/ctrl+d", "Half page down"),
    ("home/end", "Go to top/bottom"),
    ("G", "Open section picker"),
    ("enter", "Jump to selected item"),
    ("", ""),
    ("Search", ""),
    ("/", "Search all content"),
    ("o", "Search options (partial)"),
    ("O", "Search options (exact)"),
    ("d", "Search descriptions"),
    ("n/N", "Next/previous match"),
    ("esc", "Clear search"),
    ("", ""),
    ("Other", ""),
    ("?", "Show this help"),
    ("q", "Quit"),
)

HELP_FOOTER = "Press ?, esc, or q to close"
HELP_KEY_COLUMN = 14
HELP_MODAL_WIDTH = 46

KEY_HINTS: tuple[tuple[str, str], ...] = (
    ("?", "help"),
    ("/", "search"),
    ("o/O", "options"),
    ("d", "descriptions"),
    ("n/N", "matches"),
    ("G", "sections"),
    ("tab", "panes"),
    ("q", "quit"),
)


def help_body_rows(theme: UITheme) -> list[str]:
    rows: list[str] = []
    for key, description in HELP_SHORTCUTS:
        if not key and not description:
            rows.append("")
        elif not description:
            rows.append(f"{theme.help_heading}{key}{theme.reset}")
        else:
            rows.append(f"  {theme.help_key}{key:<{HELP_KEY_COLUMN}}{theme.reset} {description}")
    return rows


def key_hint_row(theme: UITheme) -> str:
    return "  ".join(f"{theme.help_key}{key}{theme.reset} {theme.help_dim}{label}{theme.reset}" for key, label in KEY_HINTS)
