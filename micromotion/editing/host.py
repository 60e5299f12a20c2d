"""Adapter between the motion functions and a host editor.

The host owns the text and the cursor. A motion reads the current line
through ``get_line_text``, computes a new position, and hands it back with
``set_cursor``. Nothing is kept between calls.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from .motions.words import compute_word_left, compute_word_right
from .types import MotionResult, Position

logger = logging.getLogger(__name__)


@runtime_checkable
class LineSource(Protocol):
    """Read-only access to the host's lines."""

    def get_line_text(self, index: int) -> str: ...

    def get_line_count(self) -> int: ...


@runtime_checkable
class CursorHost(LineSource, Protocol):
    """A line source that also owns a cursor."""

    def get_cursor(self) -> tuple[int, int]: ...

    def set_cursor(self, line: int, col: int) -> None: ...


class TextBuffer:
    """In-memory host over a block of text split on newlines."""

    def __init__(self, text: str = "", cursor: tuple[int, int] = (0, 0)) -> None:
        self._lines = text.split("\n")
        self._row = 0
        self._col = 0
        self.set_cursor(*cursor)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def get_line_text(self, index: int) -> str:
        return self._lines[index]

    def get_line_count(self) -> int:
        return len(self._lines)

    def get_cursor(self) -> tuple[int, int]:
        return self._row, self._col

    def set_cursor(self, line: int, col: int) -> None:
        """Move the cursor, clamped into the buffer."""
        self._row = max(0, min(line, len(self._lines) - 1))
        self._col = max(0, min(col, len(self._lines[self._row])))


def apply_word_right(host: CursorHost) -> MotionResult:
    """Run a word-right motion against host and move its cursor."""
    row, col = host.get_cursor()
    target = compute_word_right(
        host.get_line_text(row),
        row,
        col,
        host.get_line_count(),
        host.get_line_text,
    )
    host.set_cursor(target.row, target.col)
    return MotionResult(start=Position(row, col), position=target)


def apply_word_left(host: CursorHost) -> MotionResult:
    """Run a word-left motion against host and move its cursor."""
    row, col = host.get_cursor()
    target = compute_word_left(host.get_line_text(row), row, col, host.get_line_text)
    host.set_cursor(target.row, target.col)
    return MotionResult(start=Position(row, col), position=target)


HOST_MOTIONS = {
    "word_right": apply_word_right,
    "word_left": apply_word_left,
}


def apply_motion(host: CursorHost, name: str) -> MotionResult:
    """Apply a named motion to host.

    Raises:
        KeyError: If name is not a known motion.
    """
    result = HOST_MOTIONS[name](host)
    logger.debug("%s: %s -> %s", name, tuple(result.start), tuple(result.position))
    return result
