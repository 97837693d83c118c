"""ANSI frame renderers for the viewer and selection screens."""

from __future__ import annotations

from .selection import render_selection_frame
from .viewer import compute_pane_widths, render_viewer_frame

__all__ = ["compute_pane_widths", "render_selection_frame", "render_viewer_frame"]
