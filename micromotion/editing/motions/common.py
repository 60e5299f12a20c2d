"""Shared helpers for motion calculations."""

from __future__ import annotations

from ..types import CharClass


def _normalize(text: str, row: int, col: int) -> tuple[list[str], int, int]:
    """Normalize text and cursor position."""
    lines = text.split("\n")
    if not lines:
        lines = [""]
    row = max(0, min(row, len(lines) - 1))
    col = max(0, min(col, len(lines[row])))
    return lines, row, col


def _is_word_char(ch: str) -> bool:
    """Check if character is a word character (letter, digit, underscore)."""
    return ch.isalnum() or ch == "_"


def classify(ch: str) -> CharClass:
    """Classify a single character.

    The empty string is the "no character" sentinel used outside a line and
    classifies as punctuation, like any other non-blank, non-word value.
    """
    if ch.isspace():
        return CharClass.WHITESPACE
    if _is_word_char(ch):
        return CharClass.WORD
    return CharClass.PUNCT


def char_at(line: str, col: int) -> str:
    """Get the character at col, or "" outside the line."""
    if col < 0 or col >= len(line):
        return ""
    return line[col]
