"""Line-level helpers for unified diff text.

Only what the classifier needs: markers, escape stripping, and pulling a
file extension out of a ``diff --`` header.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Optional

DIFF_START = "diff --"
COMMIT_START = "commit"
HUNK_START = "@@"

_DIFF_GIT_RE = re.compile(r"^diff --git (?:\"?a/.*?\"? )?\"?b/(.*?)\"?$")
_PATH_PREFIX_RE = re.compile(r"^[ab]/")
# CSI (colors, cursor moves), OSC (titles, hyperlinks), two-byte escapes
_ANSI_RE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"
    r"|\x1b[@-Z\\-_]"
)


def strip_ansi_codes(line: str) -> str:
    """Remove terminal escape sequences; every other character is kept."""
    if "\x1b" not in line:
        return line
    return _ANSI_RE.sub("", line)


def _path_from_diff_line(line: str) -> Optional[str]:
    m = _DIFF_GIT_RE.match(line)
    if m:
        return m.group(1)
    # diff --cc path / diff --combined path
    parts = line.split()
    if len(parts) < 3:
        return None
    return _PATH_PREFIX_RE.sub("", parts[-1].strip('"'))


def get_file_extension_from_diff_line(line: str) -> Optional[str]:
    """Return the extension (without the dot) of the file a diff header names."""
    path = _path_from_diff_line(line)
    if not path:
        return None
    suffix = PurePosixPath(path).suffix
    return suffix[1:] if suffix else None
