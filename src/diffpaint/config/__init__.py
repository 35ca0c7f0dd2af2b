"""Configuration resolution, schema, and fixed palettes."""

from diffpaint.config.resolver import ConfigError, get_config, parse_color
from diffpaint.config.schema import LIGHT_THEMES, Config, is_light_theme

__all__ = [
    "Config",
    "ConfigError",
    "LIGHT_THEMES",
    "get_config",
    "is_light_theme",
    "parse_color",
]
