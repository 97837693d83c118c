"""Boxed modal construction and compositing over a rendered frame."""

from __future__ import annotations

from ..ui_theme import UITheme
from .ansi import display_width, pad_ansi_line, slice_ansi_line


def build_modal_box(
    title: str,
    body_rows: list[str],
    inner_width: int,
    theme: UITheme,
    footer: str = "",
) -> list[str]:
    """Frame ``body_rows`` in a rounded border with a centered title."""
    inner_width = max(4, inner_width)
    border = theme.modal_border
    reset = theme.reset
    label = f" {title} " if title else ""
    label_width = display_width(label)
    left_run = max(0, (inner_width - label_width) // 2)
    right_run = max(0, inner_width - label_width - left_run)
    rows = [
        f"{border}╭{'─' * left_run}{reset}{theme.modal_title}{label}{reset}"
        f"{border}{'─' * right_run}╮{reset}"
    ]
    content = list(body_rows)
    if footer:
        content.extend(["", f"{theme.help_dim}{footer}{reset}"])
    for row in content:
        rows.append(f"{border}│{reset}{pad_ansi_line(row, inner_width, reset)}{border}│{reset}")
    rows.append(f"{border}╰{'─' * inner_width}╯{reset}")
    return rows


def overlay_modal(base_rows: list[str], modal_rows: list[str], width: int, reset: str = "\033[0m") -> list[str]:
    """Center ``modal_rows`` over ``base_rows`` and return the composited rows."""
    if not modal_rows or not base_rows:
        return list(base_rows)
    modal_width = max(display_width(row) for row in modal_rows)
    modal_width = min(modal_width, width)
    top = max(0, (len(base_rows) - len(modal_rows)) // 2)
    left = max(0, (width - modal_width) // 2)
    out = list(base_rows)
    for offset, modal_row in enumerate(modal_rows):
        row_idx = top + offset
        if row_idx >= len(out):
            break
        base = out[row_idx]
        head = pad_ansi_line(base, left, reset) if left else ""
        tail = slice_ansi_line(base, left + modal_width, max(0, width - left - modal_width))
        middle = pad_ansi_line(modal_row, modal_width, reset)
        out[row_idx] = f"{head}{reset}{middle}{reset}{tail}{reset}"
    return out
