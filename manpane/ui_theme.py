"""UI theme definitions and selection helpers.

Themes are static ANSI palettes for the viewer chrome, panes, search
highlights, and modals. They hold no session state.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reverse: str
    reset: str
    title: str
    pane_hint: str
    selected: str
    selected_unfocused: str
    option_flag: str
    heading_line: str
    active_heading: str
    search_hit: str
    search_current: str
    match_gutter: str
    prompt: str
    status: str
    error: str
    help_heading: str
    help_key: str
    help_dim: str
    modal_title: str
    modal_border: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reverse="\033[7m",
    reset="\033[0m",
    title="\033[1;38;5;212m",
    pane_hint="\033[38;5;241m",
    selected="\033[1;38;5;229;48;5;57m",
    selected_unfocused="\033[38;5;229;48;5;238m",
    option_flag="\033[38;5;252m",
    heading_line="\033[1;38;5;81m",
    active_heading="\033[1;38;5;212m",
    search_hit="\033[30;48;5;220m",
    search_current="\033[1;30;48;5;208m",
    match_gutter="\033[38;5;214m",
    prompt="\033[1;38;5;212m",
    status="\033[38;5;250m",
    error="\033[38;5;196m",
    help_heading="\033[1;38;5;229m",
    help_key="\033[1;38;5;212m",
    help_dim="\033[38;5;241m",
    modal_title="\033[1;38;5;212m",
    modal_border="\033[38;5;212m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    pane_hint="\033[2;38;5;110m",
    selected="\033[1;38;5;231;48;5;24m",
    selected_unfocused="\033[38;5;153;48;5;237m",
    option_flag="\033[38;5;153m",
    heading_line="\033[1;38;5;39m",
    active_heading="\033[1;38;5;45m",
    search_hit="\033[30;48;5;117m",
    search_current="\033[1;30;48;5;45m",
    match_gutter="\033[38;5;45m",
    prompt="\033[1;38;5;45m",
    status="\033[38;5;153m",
    error="\033[38;5;203m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
    modal_title="\033[1;38;5;39m",
    modal_border="\033[38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="\033[7m",
    reset="\033[0m",
    title="",
    pane_hint="",
    selected="\033[7m",
    selected_unfocused="",
    option_flag="",
    heading_line="",
    active_heading="",
    search_hit="\033[4m",
    search_current="\033[7m",
    match_gutter="",
    prompt="",
    status="",
    error="",
    help_heading="",
    help_key="",
    help_dim="",
    modal_title="",
    modal_border="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
