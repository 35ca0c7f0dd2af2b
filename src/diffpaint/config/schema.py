"""Configuration schema and the fixed theme/color lookup tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, FrozenSet, Optional, Type

from pygments.style import Style
from rich.color_triplet import ColorTriplet

if TYPE_CHECKING:
    from diffpaint.highlighting.assets import HighlightingAssets

DEFAULT_DARK_THEME = "monokai"
DEFAULT_LIGHT_THEME = "solarized-light"
DEFAULT_PAGER = "less"

LIGHT_THEMES: FrozenSet[str] = frozenset(
    {
        "default",
        "friendly",
        "gruvbox-light",
        "lovelace",
        "paraiso-light",
        "solarized-light",
        "tango",
        "vs",
        "xcode",
    }
)

LIGHT_THEME_PLUS_COLOR = ColorTriplet(0xD0, 0xFF, 0xD0)
LIGHT_THEME_MINUS_COLOR = ColorTriplet(0xFF, 0xD0, 0xD0)
DARK_THEME_PLUS_COLOR = ColorTriplet(0x01, 0x3B, 0x01)
DARK_THEME_MINUS_COLOR = ColorTriplet(0x3F, 0x00, 0x01)


def is_light_theme(theme_name: str) -> bool:
    """Return True if *theme_name* is one of the known light themes."""
    return theme_name in LIGHT_THEMES


@dataclass(frozen=True)
class Config:
    """Everything a single run needs; built once by ``get_config``."""

    theme: Type[Style]
    theme_name: str
    plus_color: ColorTriplet
    minus_color: ColorTriplet
    syntax_set: "HighlightingAssets"
    width: Optional[int] = None  # reserved, not read by the painter
    highlight_removed: bool = False
    pager: str = DEFAULT_PAGER
