"""Persistent JSON config helpers.

Stores the colour theme, the width ``man`` formats to, and the side-pane
widths. Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..render.viewer import DEFAULT_SECTIONS_WIDTH, DEFAULT_SIDEBAR_WIDTH
from ..source.manpage import DEFAULT_MAN_WIDTH
from ..ui_theme import DEFAULT_THEME, normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "manpane"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

MIN_MAN_WIDTH = 20
MAX_MAN_WIDTH = 400
MAX_SIDE_PANE_WIDTH = 120


@dataclass(frozen=True)
class ViewerConfig:
    theme: str = DEFAULT_THEME.name
    man_width: int = DEFAULT_MAN_WIDTH
    sidebar_width: int = DEFAULT_SIDEBAR_WIDTH
    sections_width: int = DEFAULT_SECTIONS_WIDTH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _load_int(data: dict[str, object], key: str, default: int, low: int, high: int) -> int:
    value = data.get(key)
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < low or value > high:
        return default
    return value


def load_theme_name() -> str:
    """Return the persisted theme name, or the default theme for unknown values."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return DEFAULT_THEME.name
    return normalize_theme_name(value)


def save_theme_name(theme_name: str) -> None:
    config = load_config()
    config["theme"] = normalize_theme_name(theme_name)
    save_config(config)


def load_viewer_config() -> ViewerConfig:
    data = load_config()
    return ViewerConfig(
        theme=load_theme_name(),
        man_width=_load_int(data, "man_width", DEFAULT_MAN_WIDTH, MIN_MAN_WIDTH, MAX_MAN_WIDTH),
        sidebar_width=_load_int(data, "sidebar_width", DEFAULT_SIDEBAR_WIDTH, 0, MAX_SIDE_PANE_WIDTH),
        sections_width=_load_int(data, "sections_width", DEFAULT_SECTIONS_WIDTH, 0, MAX_SIDE_PANE_WIDTH),
    )
