"""Shared fixtures and mocks for keybindings tests."""

from __future__ import annotations

from micromotion.core.keymap import ActionKeyDef, KeymapProvider


class MockKeymapProvider(KeymapProvider):
    """Mock keymap provider for testing custom keymaps."""

    def __init__(self, action_keys: list[ActionKeyDef] | None = None):
        self._action_keys = action_keys or []

    def get_action_keys(self) -> list[ActionKeyDef]:
        return self._action_keys
