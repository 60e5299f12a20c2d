"""Textual editor app demonstrating the word motions."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer

from micromotion.core.keymap import EditorMode
from micromotion.ui.text_area import MotionTextArea

logger = logging.getLogger(__name__)


class MicroMotionApp(App):
    """Single-buffer editor with Micro-style ctrl+left / ctrl+right."""

    TITLE = "micromotion"

    BINDINGS = [
        Binding("ctrl+s", "save", "Save"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, path: Path | None = None, text: str | None = None) -> None:
        super().__init__()
        self.file_path = path
        if text is None:
            text = path.read_text(encoding="utf-8") if path is not None and path.exists() else ""
        self._initial_text = text

    def compose(self) -> ComposeResult:
        editor = MotionTextArea(self._initial_text, id="editor")
        if self.file_path is not None:
            editor.border_title = str(self.file_path)
        yield editor
        yield Footer()

    def on_mount(self) -> None:
        self.editor.focus()

    @property
    def editor(self) -> MotionTextArea:
        return self.query_one("#editor", MotionTextArea)

    @property
    def editor_mode(self) -> EditorMode:
        return self.editor.input_mode

    def action_save(self) -> None:
        """Write the buffer back to the opened file."""
        if self.file_path is None:
            self.notify("No file to save to", severity="warning")
            return
        try:
            self.file_path.write_text(self.editor.text, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to save %s: %s", self.file_path, exc)
            self.notify(f"Save failed: {exc}", severity="error")
            return
        logger.info("Saved %s", self.file_path)
        self.notify(f"Saved {self.file_path}")
