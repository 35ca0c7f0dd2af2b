"""Turn buffered diff text into 24-bit ANSI escaped output.

Escape format:
  - background: ``ESC[48;2;R;G;Bm`` at the start of each painted line
  - foreground: ``ESC[38;2;R;G;Bm`` immediately before each token

No reset sequence is written; a colored line relies on the next escape
to override it.
"""

from __future__ import annotations

import io
from typing import List, Optional, Sequence, TextIO

from pygments.lexer import Lexer
from rich.color_triplet import ColorTriplet

from diffpaint.config.schema import Config
from diffpaint.highlighting.highlighter import Highlighter, Range


def background_escape(color: ColorTriplet) -> str:
    return f"\x1b[48;2;{color.red};{color.green};{color.blue}m"


def foreground_escape(color: ColorTriplet) -> str:
    return f"\x1b[38;2;{color.red};{color.green};{color.blue}m"


def paint_text(
    text: str,
    syntax: Lexer,
    background_color: Optional[ColorTriplet],
    config: Config,
    apply_syntax_highlighting: bool,
    buf: TextIO,
) -> None:
    """Append the escaped rendering of *text* to *buf*."""
    highlighter = Highlighter(syntax, config.theme)
    for ranges in highlighter.highlight_lines(text):
        if background_color is not None:
            buf.write(background_escape(background_color))
        _paint_ranges(ranges, apply_syntax_highlighting, buf)


def _paint_ranges(
    ranges: Sequence[Range],
    apply_syntax_highlighting: bool,
    buf: TextIO,
) -> None:
    for foreground, text in ranges:
        if apply_syntax_highlighting:
            buf.write(foreground_escape(foreground))
        buf.write(text)


class Painter:
    """Holds the pending minus/plus lines and writes painted blocks.

    ``minus_lines`` and ``plus_lines`` are filled by the classifier and
    emptied together by :meth:`paint_and_emit_buffered_lines`.
    """

    def __init__(
        self,
        writer: TextIO,
        config: Config,
        syntax: Optional[Lexer] = None,
    ) -> None:
        self.minus_lines: List[str] = []
        self.plus_lines: List[str] = []
        self.writer = writer
        self.syntax = syntax
        self.config = config
        self.output_buffer = io.StringIO()

    def is_empty(self) -> bool:
        return not self.minus_lines and not self.plus_lines

    def paint_and_emit_buffered_lines(self) -> None:
        """Flush both pending blocks, removed lines first."""
        if self.is_empty():
            return
        self.paint_and_emit_text(
            "\n".join(self.minus_lines),
            self.config.minus_color,
            self.config.highlight_removed,
        )
        self.minus_lines.clear()
        self.paint_and_emit_text(
            "\n".join(self.plus_lines),
            self.config.plus_color,
            True,
        )
        self.plus_lines.clear()

    def paint_and_emit_text(
        self,
        text: str,
        background_color: Optional[ColorTriplet],
        apply_syntax_highlighting: bool,
    ) -> None:
        """Paint *text* and write it to the sink as one output line."""
        if self.syntax is None:
            raise ValueError("no active syntax to paint with")
        try:
            paint_text(
                text,
                self.syntax,
                background_color,
                self.config,
                apply_syntax_highlighting,
                self.output_buffer,
            )
            self.writer.write(self.output_buffer.getvalue() + "\n")
        finally:
            self.output_buffer.seek(0)
            self.output_buffer.truncate(0)
