"""Syntax/theme assets and the per-block highlighter."""

from diffpaint.highlighting.assets import HighlightingAssets, ThemeNotFound
from diffpaint.highlighting.highlighter import Highlighter, Range

__all__ = [
    "HighlightingAssets",
    "Highlighter",
    "Range",
    "ThemeNotFound",
]
