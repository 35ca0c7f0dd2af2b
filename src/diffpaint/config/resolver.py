"""Resolve theme, colors, and flags into a Config."""

from __future__ import annotations

from typing import Optional

from rich.color import Color, ColorParseError
from rich.color_triplet import ColorTriplet

from diffpaint.config.schema import (
    DARK_THEME_MINUS_COLOR,
    DARK_THEME_PLUS_COLOR,
    DEFAULT_DARK_THEME,
    DEFAULT_LIGHT_THEME,
    DEFAULT_PAGER,
    LIGHT_THEME_MINUS_COLOR,
    LIGHT_THEME_PLUS_COLOR,
    Config,
    is_light_theme,
)
from diffpaint.highlighting.assets import HighlightingAssets, ThemeNotFound


class ConfigError(Exception):
    """Raised when the requested configuration cannot be honoured."""


def parse_color(text: Optional[str]) -> Optional[ColorTriplet]:
    """Parse *text* as an RGB color, returning None if it is not one.

    Accepts anything ``rich`` understands: ``#rrggbb``, ``rgb(r,g,b)``,
    and named colors.
    """
    if not text:
        return None
    try:
        color = Color.parse(text)
    except ColorParseError:
        return None
    if color.is_default:
        return None
    return color.get_truecolor()


def resolve_theme_name(theme: Optional[str], light: bool) -> str:
    """Pick the explicit theme, or the default for the terminal background."""
    if theme:
        return theme
    return DEFAULT_LIGHT_THEME if light else DEFAULT_DARK_THEME


def get_config(
    assets: HighlightingAssets,
    *,
    theme: Optional[str] = None,
    light: bool = False,
    plus_color: Optional[str] = None,
    minus_color: Optional[str] = None,
    highlight_removed: bool = False,
    width: Optional[int] = None,
    pager: str = DEFAULT_PAGER,
) -> Config:
    """Build the run configuration.

    Malformed color overrides fall back silently to the theme's palette.
    An unknown theme name raises ConfigError.
    """
    theme_name = resolve_theme_name(theme, light)
    try:
        style = assets.get_theme(theme_name)
    except ThemeNotFound as exc:
        raise ConfigError(f"Unknown theme: {theme_name}") from exc

    light_theme = is_light_theme(theme_name)
    default_plus = LIGHT_THEME_PLUS_COLOR if light_theme else DARK_THEME_PLUS_COLOR
    default_minus = LIGHT_THEME_MINUS_COLOR if light_theme else DARK_THEME_MINUS_COLOR

    return Config(
        theme=style,
        theme_name=theme_name,
        plus_color=parse_color(plus_color) or default_plus,
        minus_color=parse_color(minus_color) or default_minus,
        syntax_set=assets,
        width=width,
        highlight_removed=highlight_removed,
        pager=pager,
    )
