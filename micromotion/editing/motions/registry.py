"""Motion registry and bindings."""

from __future__ import annotations

from ..types import MotionFunc
from .words import motion_word_left, motion_word_right

# Motion registry
MOTIONS: dict[str, MotionFunc] = {
    "word_right": motion_word_right,  # ctrl+right
    "word_left": motion_word_left,  # ctrl+left
}
