"""Keymap provider for keybinding configuration.

Usage:
    from micromotion.core.keymap import get_keymap

    keymap = get_keymap()
    key = keymap.action("word_right", mode=EditorMode.INSERT)  # "ctrl+right"
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

logger = logging.getLogger(__name__)

KEY_DISPLAY_OVERRIDES: dict[str, str] = {
    "ctrl+right": "^→",
    "ctrl+left": "^←",
    "escape": "esc",
}


def format_key(key: str) -> str:
    """Format a key name for display in UI hints."""
    if key in KEY_DISPLAY_OVERRIDES:
        return KEY_DISPLAY_OVERRIDES[key]
    if key.startswith("ctrl+"):
        return f"^{key.split('+', 1)[1]}"
    return key


class EditorMode(str, Enum):
    """Input modes a binding can apply to."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"


class KeymapError(ValueError):
    """Raised when a keymap configuration is invalid."""


# Actions a keymap may bind.
MOTION_ACTIONS: dict[str, str] = {
    "word_right": "Micro-style word right",
    "word_left": "Micro-style word left",
}


@dataclass
class ActionKeyDef:
    """Definition of a regular action keybinding."""

    key: str  # The key to press
    action: str  # The action name
    mode: EditorMode | None = None  # None applies to every mode
    label: str | None = None  # Display label
    primary: bool = True  # Primary key for display vs secondary aliases

    def applies_to(self, mode: EditorMode | None) -> bool:
        return mode is None or self.mode is None or self.mode == mode


class KeymapProvider(ABC):
    """Abstract base class for keymap providers."""

    @abstractmethod
    def get_action_keys(self) -> list[ActionKeyDef]:
        """Get all action key definitions."""
        raise NotImplementedError

    def action(self, action_name: str, mode: EditorMode | None = None) -> str | None:
        """Get the display key for an action, preferring primary bindings."""
        keys = self.keys_for_action(action_name, mode=mode, include_secondary=True)
        return keys[0] if keys else None

    def keys_for_action(
        self,
        action_name: str,
        mode: EditorMode | None = None,
        *,
        include_secondary: bool = True,
    ) -> list[str]:
        """Get all keys for an action, primary first."""
        primary_keys: list[str] = []
        secondary_keys: list[str] = []
        seen: set[str] = set()
        for ak in self.get_action_keys():
            if ak.action != action_name or not ak.applies_to(mode):
                continue
            if ak.key in seen:
                continue
            seen.add(ak.key)
            if ak.primary:
                primary_keys.append(ak.key)
            elif include_secondary:
                secondary_keys.append(ak.key)
        return primary_keys + secondary_keys

    def actions_for_key(self, key: str, mode: EditorMode | None = None) -> list[str]:
        """Get all actions bound to a key."""
        return [ak.action for ak in self.get_action_keys() if ak.key == key and ak.applies_to(mode)]


class DefaultKeymapProvider(KeymapProvider):
    """Default keymap: ctrl+right / ctrl+left in every input mode."""

    def get_action_keys(self) -> list[ActionKeyDef]:
        keys: list[ActionKeyDef] = []
        for mode in EditorMode:
            keys.append(ActionKeyDef("ctrl+right", "word_right", mode, MOTION_ACTIONS["word_right"]))
            keys.append(ActionKeyDef("ctrl+left", "word_left", mode, MOTION_ACTIONS["word_left"]))
        return keys


class SettingsKeymapProvider(KeymapProvider):
    """Keymap built from the ``keymap`` setting on top of a base provider.

    The setting maps an action to a list of keys. Listed actions replace their
    default keys in every mode; the first key is primary.
    """

    def __init__(
        self,
        overrides: Mapping[str, Any] | None,
        base: KeymapProvider | None = None,
    ) -> None:
        self._overrides = _validate_overrides(overrides or {})
        self._base = base or DefaultKeymapProvider()

    def get_action_keys(self) -> list[ActionKeyDef]:
        keys = [ak for ak in self._base.get_action_keys() if ak.action not in self._overrides]
        for action_name, action_keys in self._overrides.items():
            for mode in EditorMode:
                for index, key in enumerate(action_keys):
                    keys.append(
                        ActionKeyDef(
                            key,
                            action_name,
                            mode,
                            MOTION_ACTIONS[action_name],
                            primary=index == 0,
                        )
                    )
        return keys


def _validate_overrides(overrides: Mapping[str, Any]) -> dict[str, list[str]]:
    if not isinstance(overrides, Mapping):
        raise KeymapError(f"keymap must be an object, got {type(overrides).__name__}")
    validated: dict[str, list[str]] = {}
    for action_name, keys in overrides.items():
        if action_name not in MOTION_ACTIONS:
            known = ", ".join(sorted(MOTION_ACTIONS))
            raise KeymapError(f"Unknown keymap action {action_name!r} (known: {known})")
        if isinstance(keys, str):
            keys = [keys]
        if not isinstance(keys, list) or not all(isinstance(k, str) and k for k in keys):
            raise KeymapError(f"Keys for {action_name!r} must be a list of key names")
        validated[action_name] = list(keys)
    return validated


def keymap_from_settings(settings: Mapping[str, Any]) -> KeymapProvider:
    """Build the keymap described by settings, or the default one."""
    overrides = settings.get("keymap")
    if not overrides:
        return DefaultKeymapProvider()
    provider = SettingsKeymapProvider(overrides)
    logger.info("Using custom keymap for: %s", ", ".join(sorted(overrides)))
    return provider


# Global keymap instance
_keymap_provider: KeymapProvider | None = None


def get_keymap() -> KeymapProvider:
    """Get the current keymap provider."""
    global _keymap_provider
    if _keymap_provider is None:
        _keymap_provider = DefaultKeymapProvider()
    return _keymap_provider


def set_keymap(provider: KeymapProvider) -> None:
    """Set the keymap provider (for testing or custom keymaps)."""
    global _keymap_provider
    _keymap_provider = provider


def reset_keymap() -> None:
    """Reset to default keymap provider."""
    global _keymap_provider
    _keymap_provider = None
