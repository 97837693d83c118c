"""Public runtime entry points.

Groups the session bootstrap (``run_session``) and the lower-level event
loops used by tests and composition code.
"""

from __future__ import annotations


def run_session(*args, **kwargs):
    """Lazily import the session entrypoint to keep package imports light."""
    from .app import run_session as _run_session

    return _run_session(*args, **kwargs)


def run_viewer_loop(*args, **kwargs):
    """Lazily import the viewer loop to avoid package-import cycles."""
    from .loop import run_viewer_loop as _run_viewer_loop

    return _run_viewer_loop(*args, **kwargs)


def run_selection_loop(*args, **kwargs):
    from .loop import run_selection_loop as _run_selection_loop

    return _run_selection_loop(*args, **kwargs)


__all__ = ["run_session", "run_viewer_loop", "run_selection_loop"]
