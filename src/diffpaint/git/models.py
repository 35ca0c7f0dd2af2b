"""Line classification states."""

from __future__ import annotations

from enum import Enum


class State(str, Enum):
    COMMIT = "commit"  # commit metadata section
    DIFF_META = "diff_meta"  # between commit metadata and the first hunk
    HUNK_META = "hunk_meta"  # the "@@" line
    HUNK_ZERO = "hunk_zero"  # unchanged line
    HUNK_MINUS = "hunk_minus"  # removed line
    HUNK_PLUS = "hunk_plus"  # added line
    UNKNOWN = "unknown"


HUNK_STATES = frozenset(
    {State.HUNK_META, State.HUNK_ZERO, State.HUNK_MINUS, State.HUNK_PLUS}
)
