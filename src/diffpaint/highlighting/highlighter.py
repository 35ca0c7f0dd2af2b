"""Per-block syntax highlighting.

A Highlighter lexes a whole block of lines in one pass, so tokens that span
lines (docstrings, block comments) are colored with their full context, and
then splits the token stream back into lines. Each line comes back as an
ordered list of ``(foreground, substring)`` ranges whose substrings
concatenate to the original line, terminator included.
"""

from __future__ import annotations

from typing import Dict, List, Tuple, Type

from pygments.lexer import Lexer
from pygments.style import Style
from pygments.token import Token, _TokenType
from rich.color import parse_rgb_hex
from rich.color_triplet import ColorTriplet

Range = Tuple[ColorTriplet, str]

_BLACK = ColorTriplet(0, 0, 0)
_WHITE = ColorTriplet(0xFF, 0xFF, 0xFF)


def hex_to_triplet(value: str) -> ColorTriplet:
    """Convert ``#rgb`` / ``#rrggbb`` (leading ``#`` optional) to a triplet."""
    value = value.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    return parse_rgb_hex(value[:6])


def default_foreground(theme: Type[Style]) -> ColorTriplet:
    """Foreground for tokens the theme leaves uncolored."""
    base = theme.style_for_token(Token)["color"] if Token in theme else None
    if base:
        return hex_to_triplet(base)
    background = hex_to_triplet(theme.background_color or "#ffffff")
    luminance = 0.299 * background.red + 0.587 * background.green + 0.114 * background.blue
    return _BLACK if luminance > 127 else _WHITE


class Highlighter:
    """Highlighting state for one (syntax, theme) pair; lives for one block."""

    def __init__(self, syntax: Lexer, theme: Type[Style]) -> None:
        self._syntax = syntax
        self._theme = theme
        self._default = default_foreground(theme)
        self._colors: Dict[_TokenType, ColorTriplet] = {}

    def _color_for(self, ttype: _TokenType) -> ColorTriplet:
        color = self._colors.get(ttype)
        if color is None:
            # Lexers may emit token types the theme has never heard of.
            known = ttype
            while known not in self._theme and known.parent is not None:
                known = known.parent
            value = self._theme.style_for_token(known)["color"] if known in self._theme else None
            color = hex_to_triplet(value) if value else self._default
            self._colors[ttype] = color
        return color

    def highlight_lines(self, text: str) -> List[List[Range]]:
        """Return the styled ranges of each line of *text*."""
        lines: List[List[Range]] = []
        current: List[Range] = []
        # get_tokens() would rewrite "\r" to "\n" and expand tabs
        for _, ttype, value in self._syntax.get_tokens_unprocessed(text):
            color = self._color_for(ttype)
            while value:
                head, newline, value = value.partition("\n")
                current.append((color, head + newline))
                if newline:
                    lines.append(current)
                    current = []
        if current:
            lines.append(current)
        return lines
