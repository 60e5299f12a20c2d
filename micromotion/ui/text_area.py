"""Text-area widget with Micro-style word motions."""

from __future__ import annotations

import logging

from textual.binding import Binding
from textual.containers import ScrollableContainer
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import TextArea

from micromotion.core.keymap import MOTION_ACTIONS, EditorMode, get_keymap
from micromotion.editing import MOTIONS, MotionResult, apply_motion

logger = logging.getLogger(__name__)

# Plain word-jump keys belong to the keymap, so a remap can take them away.
KEYMAP_OWNED_KEYS = frozenset({"ctrl+left", "ctrl+right"})


def _text_area_bindings() -> list[Binding]:
    """TextArea's inherited bindings without the keys the keymap owns."""
    merged: dict[str, list[Binding]] = {}
    for class_bindings in (ScrollableContainer.BINDINGS, TextArea.BINDINGS):
        by_key: dict[str, list[Binding]] = {}
        for binding in Binding.make_bindings(class_bindings):
            by_key.setdefault(binding.key, []).append(binding)
        merged.update(by_key)
    return [
        binding
        for key, bindings in merged.items()
        if key not in KEYMAP_OWNED_KEYS
        for binding in bindings
    ]


class MotionTextArea(TextArea, inherit_bindings=False):
    """TextArea whose word jumps follow Micro's token boundaries.

    The widget is its own motion host: lines come from the document and the
    cursor is the TextArea cursor. Bindings are resolved through the keymap
    for the current mode, so remapped keys work in normal, insert and visual
    mode alike.
    """

    BINDINGS = _text_area_bindings()

    input_mode: reactive[EditorMode] = reactive(EditorMode.INSERT)

    def get_line_text(self, index: int) -> str:
        return self.document.get_line(index)

    def get_line_count(self) -> int:
        return self.document.line_count

    def get_cursor(self) -> tuple[int, int]:
        row, col = self.cursor_location
        return row, col

    def set_cursor(self, line: int, col: int) -> None:
        self.move_cursor((line, col))

    def watch_input_mode(self, mode: EditorMode) -> None:
        logger.debug("Editor mode: %s", mode.value)
        self.read_only = mode is not EditorMode.INSERT
        self.border_subtitle = mode.value.upper()

    def run_motion(self, name: str, *, select: bool = False) -> MotionResult:
        """Run a named word motion from the cursor."""
        if select:
            row, col = self.cursor_location
            result = MOTIONS[name](self.text, row, col, None)
            self.move_cursor(result.position, select=True)
            return result
        return apply_motion(self, name)

    def action_cursor_word_right(self, select: bool = False) -> None:
        """Move to the end of the current/next word."""
        self.run_motion("word_right", select=select)

    def action_cursor_word_left(self, select: bool = False) -> None:
        """Move to the start of the current/previous word."""
        self.run_motion("word_left", select=select)

    async def _on_key(self, event: Key) -> None:
        """Intercept mode switches and keymap-bound motions."""
        if self._handle_mode_key(event.key):
            event.prevent_default()
            event.stop()
            return

        for action_name in get_keymap().actions_for_key(event.key, self.input_mode):
            if action_name in MOTION_ACTIONS:
                self.run_motion(action_name)
                event.prevent_default()
                event.stop()
                return

        await super()._on_key(event)

    def _handle_mode_key(self, key: str) -> bool:
        if key == "escape" and self.input_mode is not EditorMode.NORMAL:
            self.input_mode = EditorMode.NORMAL
            return True
        if self.input_mode is EditorMode.INSERT:
            return False
        if key == "i":
            self.input_mode = EditorMode.INSERT
            return True
        if key == "v":
            if self.input_mode is EditorMode.VISUAL:
                self.input_mode = EditorMode.NORMAL
            else:
                self.input_mode = EditorMode.VISUAL
            return True
        return False
