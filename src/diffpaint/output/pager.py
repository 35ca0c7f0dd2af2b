"""Pick the output sink: standard output or a pager subprocess."""

from __future__ import annotations

import shlex
import subprocess
import sys
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List, Optional, TextIO


class PagingMode(str, Enum):
    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"  # quit immediately if the output fits on one screen


def pager_command(mode: PagingMode, pager: str) -> List[str]:
    """Build the argv for *pager*; ``less`` gets the flags it needs for color."""
    args = shlex.split(pager)
    if args and args[0].endswith("less"):
        if "-R" not in args:
            args.append("-R")
        if mode is PagingMode.AUTO:
            args.extend(["-F", "-X"])
    return args


def _use_pager(mode: PagingMode, stdout: TextIO) -> bool:
    if mode is PagingMode.NEVER:
        return False
    isatty = getattr(stdout, "isatty", None)
    return bool(isatty and isatty())


@contextmanager
def open_output(
    mode: PagingMode,
    pager: str,
    stdout: Optional[TextIO] = None,
) -> Iterator[TextIO]:
    """Yield something to write text to.

    A pager is only started when stdout is a terminal; a missing pager
    executable falls back to stdout. On exit the pager's stdin is closed
    and the process is waited on.
    """
    stdout = stdout if stdout is not None else sys.stdout
    if not _use_pager(mode, stdout):
        try:
            yield stdout
        finally:
            stdout.flush()
        return

    try:
        proc = subprocess.Popen(
            pager_command(mode, pager),
            stdin=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        try:
            yield stdout
        finally:
            stdout.flush()
        return

    stdin = proc.stdin  # always set: stdin=PIPE
    try:
        yield stdin
    finally:
        try:
            stdin.close()
        except BrokenPipeError:
            pass  # the user quit the pager early
        proc.wait()
