"""Line classification state machine.

Transitions, with the action taken on entry::

    from \\ to | Commit      | DiffMeta    | HunkMeta    | HunkZero    | HunkMinus   | HunkPlus
    ----------+-------------+-------------+-------------+-------------+-------------+---------
    Commit    | emit        | emit        |             |             |             |
    DiffMeta  |             | emit        | emit        |             |             |
    HunkMeta  |             |             |             | emit        | push        | push
    HunkZero  | emit        |             | emit        | emit        | push        | push
    HunkMinus | flush, emit | flush, emit | flush, emit | flush, emit | push        | push
    HunkPlus  | flush, emit | flush, emit | flush, emit | flush, emit | flush, push | push

A removed run followed by an added run is one flush unit; a removed run
that starts right after an added run begins a new one.
"""

from __future__ import annotations

from typing import Iterable, TextIO

from diffpaint.config.schema import Config
from diffpaint.git.diff_parser import (
    COMMIT_START,
    DIFF_START,
    HUNK_START,
    get_file_extension_from_diff_line,
    strip_ansi_codes,
)
from diffpaint.git.models import HUNK_STATES, State
from diffpaint.output.painter import Painter


class DiffClassifier:
    """Feeds diff lines one at a time through the state machine.

    Hunk content is buffered or painted; every other line is written back
    in its original form, escape codes and all.
    """

    def __init__(self, config: Config, writer: TextIO) -> None:
        self.config = config
        self.state = State.UNKNOWN
        self.painter = Painter(writer, config)

    def feed(self, raw_line: str) -> None:
        """Classify one line (without its terminator) and act on it."""
        painter = self.painter
        line = strip_ansi_codes(raw_line)

        if line.startswith(DIFF_START):
            painter.paint_and_emit_buffered_lines()
            self.state = State.DIFF_META
            extension = get_file_extension_from_diff_line(line)
            painter.syntax = (
                self.config.syntax_set.find_syntax_by_extension(extension)
                if extension
                else None
            )
        elif line.startswith(COMMIT_START):
            painter.paint_and_emit_buffered_lines()
            self.state = State.COMMIT
        elif line.startswith(HUNK_START):
            self.state = State.HUNK_META
        elif self.state in HUNK_STATES and painter.syntax is not None:
            first = line[:1]
            if first == "-":
                if self.state is State.HUNK_PLUS:
                    painter.paint_and_emit_buffered_lines()
                painter.minus_lines.append(line)
                self.state = State.HUNK_MINUS
            elif first == "+":
                painter.plus_lines.append(line)
                self.state = State.HUNK_PLUS
            else:
                painter.paint_and_emit_buffered_lines()
                self.state = State.HUNK_ZERO
                painter.paint_and_emit_text(line, None, True)
            return

        painter.writer.write(raw_line + "\n")

    def finish(self) -> None:
        """Flush whatever is still buffered at end of input."""
        self.painter.paint_and_emit_buffered_lines()


def delta(lines: Iterable[str], config: Config, writer: TextIO) -> None:
    """Colorize *lines* into *writer*.

    Trailing ``\\n`` / ``\\r\\n`` terminators are removed before
    classification. Write errors propagate to the caller unchanged.
    """
    classifier = DiffClassifier(config, writer)
    for raw_line in lines:
        classifier.feed(raw_line.rstrip("\r\n"))
    classifier.finish()
