"""Painting and output sinks."""

from diffpaint.output.pager import PagingMode, open_output
from diffpaint.output.painter import Painter, paint_text

__all__ = [
    "PagingMode",
    "Painter",
    "open_output",
    "paint_text",
]
