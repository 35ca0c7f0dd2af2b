"""diffpaint: syntax-highlighted diffs for the terminal."""

__version__ = "0.1.0"
