"""Types for the word motion engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NamedTuple, Protocol


class CharClass(Enum):
    """Class of a single character for word motions."""

    WHITESPACE = "whitespace"
    WORD = "word"  # Letters, digits, underscore
    PUNCT = "punct"  # Everything else


class Direction(IntEnum):
    """Scan direction, used as the column step."""

    FORWARD = 1
    BACKWARD = -1


class Position(NamedTuple):
    """A (row, col) position in text. Column is an offset into the line."""

    row: int
    col: int


@dataclass(frozen=True)
class MotionResult:
    """Result of a motion calculation."""

    start: Position
    position: Position

    @property
    def moved(self) -> bool:
        return self.position != self.start

    @property
    def crossed_line(self) -> bool:
        return self.position.row != self.start.row


class MotionFunc(Protocol):
    """Protocol for whole-text motion functions."""

    def __call__(
        self, text: str, row: int, col: int, char: str | None = None
    ) -> MotionResult: ...
