"""Diff text helpers and classification states."""

from diffpaint.git.diff_parser import (
    COMMIT_START,
    DIFF_START,
    HUNK_START,
    get_file_extension_from_diff_line,
    strip_ansi_codes,
)
from diffpaint.git.models import HUNK_STATES, State

__all__ = [
    "COMMIT_START",
    "DIFF_START",
    "HUNK_START",
    "HUNK_STATES",
    "State",
    "get_file_extension_from_diff_line",
    "strip_ansi_codes",
]
