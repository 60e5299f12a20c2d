"""Editing helpers: Micro-style word motions and the host adapter."""

from .host import (
    CursorHost,
    LineSource,
    TextBuffer,
    apply_motion,
    apply_word_left,
    apply_word_right,
)
from .motions.common import classify
from .motions.registry import MOTIONS
from .motions.words import (
    compute_word_left,
    compute_word_right,
    motion_word_left,
    motion_word_right,
    scan_word,
    word_left,
    word_right,
)
from .types import CharClass, Direction, MotionResult, Position

__all__ = [
    # Types
    "CharClass",
    "Direction",
    "MotionResult",
    "Position",
    # Classifier
    "classify",
    # Scanners
    "scan_word",
    "word_left",
    "word_right",
    "compute_word_left",
    "compute_word_right",
    # Motions
    "MOTIONS",
    "motion_word_left",
    "motion_word_right",
    # Host adapter
    "CursorHost",
    "LineSource",
    "TextBuffer",
    "apply_motion",
    "apply_word_left",
    "apply_word_right",
]
