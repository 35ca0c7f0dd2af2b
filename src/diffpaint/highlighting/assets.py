"""Theme and syntax lookup backed by Pygments styles and lexers."""

from __future__ import annotations

from typing import Dict, List, Optional, Type

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_for_filename
from pygments.style import Style
from pygments.styles import get_all_styles, get_style_by_name
from pygments.util import ClassNotFound


class ThemeNotFound(KeyError):
    """Raised when no Pygments style exists under the requested name."""


class HighlightingAssets:
    """Syntax and theme catalogue shared by one run.

    Lexers are created with ``stripnl=False`` and ``ensurenl=False`` so the
    token stream concatenates back to exactly the text that was lexed.
    """

    def __init__(self) -> None:
        self._syntaxes: Dict[str, Optional[Lexer]] = {}

    def theme_names(self) -> List[str]:
        return sorted(get_all_styles())

    def get_theme(self, name: str) -> Type[Style]:
        try:
            return get_style_by_name(name)
        except ClassNotFound as exc:
            raise ThemeNotFound(name) from exc

    def find_syntax_by_extension(self, extension: str) -> Optional[Lexer]:
        """Return a lexer for files ending in ``.<extension>``, or None."""
        if extension in self._syntaxes:
            return self._syntaxes[extension]
        try:
            lexer = get_lexer_for_filename(
                f"file.{extension}", stripnl=False, ensurenl=False
            )
        except ClassNotFound:
            lexer = None
        self._syntaxes[extension] = lexer
        return lexer
