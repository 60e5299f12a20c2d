"""Micro-style word motions.

Forward motion stops at the END of a token (right after its last character,
before any trailing whitespace). Backward motion stops at the START of a
token. Tokens are runs of word characters or runs of punctuation; a
punctuation character only groups with its neighbour when that neighbour is
punctuation too, so a lone symbol is a token of its own.

At a line edge the motion crosses to the adjacent line: forward lands on
column 0 of the next line, backward on the end of the previous one.
"""

from __future__ import annotations

from typing import Callable

from ..types import CharClass, Direction, MotionResult, Position
from .common import _normalize, char_at, classify


def _class_ahead(line: str, col: int, direction: Direction) -> CharClass | None:
    """Class of the character the cursor would step over, or None at the line edge."""
    if direction is Direction.FORWARD:
        if col >= len(line):
            return None
        return classify(char_at(line, col))
    if col <= 0:
        return None
    return classify(char_at(line, col - 1))


def scan_word(line: str, col: int, direction: Direction) -> int:
    """Scan one word from col within a single line.

    Skips whitespace ahead of the cursor, then consumes the run of whatever
    class comes next. Never leaves [0, len(line)].
    """
    col = max(0, min(col, len(line)))

    while _class_ahead(line, col, direction) is CharClass.WHITESPACE:
        col += direction

    run_class = _class_ahead(line, col, direction)
    if run_class is None:
        return col
    while _class_ahead(line, col, direction) is run_class:
        col += direction
    return col


def word_right(line: str, col: int) -> int:
    """Column after moving one word right on the same line."""
    return scan_word(line, col, Direction.FORWARD)


def word_left(line: str, col: int) -> int:
    """Column after moving one word left on the same line."""
    return scan_word(line, col, Direction.BACKWARD)


def compute_word_right(
    line_text: str,
    line_index: int,
    column: int,
    line_count: int,
    next_line_text_provider: Callable[[int], str] | None = None,
) -> Position:
    """Position after one word-right motion, crossing to the next line at EOL.

    At the end of the last line the cursor stays put, even past the end.

    next_line_text_provider is accepted so both directions share a call
    shape; landing on column 0 never needs the next line's text.
    """
    if column >= len(line_text):
        if line_index < line_count - 1:
            return Position(line_index + 1, 0)
        return Position(line_index, column)
    return Position(line_index, word_right(line_text, column))


def compute_word_left(
    line_text: str,
    line_index: int,
    column: int,
    prev_line_text_provider: Callable[[int], str],
) -> Position:
    """Position after one word-left motion, crossing to the previous line at column 0."""
    if column <= 0:
        if line_index > 0:
            prev_line = prev_line_text_provider(line_index - 1)
            return Position(line_index - 1, len(prev_line))
        return Position(line_index, 0)
    return Position(line_index, word_left(line_text, column))


def motion_word_right(
    text: str, row: int, col: int, char: str | None = None
) -> MotionResult:
    """Move to end of the current/next word (ctrl+right)."""
    lines, row, col = _normalize(text, row, col)
    start_pos = Position(row, col)
    end_pos = compute_word_right(lines[row], row, col, len(lines), lines.__getitem__)
    return MotionResult(start=start_pos, position=end_pos)


def motion_word_left(
    text: str, row: int, col: int, char: str | None = None
) -> MotionResult:
    """Move to start of the current/previous word (ctrl+left)."""
    lines, row, col = _normalize(text, row, col)
    start_pos = Position(row, col)
    end_pos = compute_word_left(lines[row], row, col, lines.__getitem__)
    return MotionResult(start=start_pos, position=end_pos)
