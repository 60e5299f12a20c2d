"""Settings store for managing application settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from micromotion.shared.core.store import CONFIG_DIR, JSONFileStore

DEFAULT_LOG_LEVEL = "WARNING"


def _resolve_settings_path() -> Path:
    override = os.environ.get("MICROMOTION_SETTINGS_PATH", "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "settings.json"


class SettingsStore(JSONFileStore):
    """Store for managing application settings.

    Settings are stored as a JSON object in ~/.micromotion/settings.json.
    Recognized keys:

    - ``keymap``: mapping of action name to a list of keys, e.g.
      ``{"word_right": ["ctrl+right", "alt+f"]}``
    - ``log_level``: logging level name (default ``WARNING``)
    """

    def __init__(self, file_path: Path | None = None) -> None:
        super().__init__(file_path or _resolve_settings_path())

    @classmethod
    def get_instance(cls) -> SettingsStore:
        """Get the shared instance for the current settings path."""
        return _get_store()

    def load_all(self) -> dict[str, Any]:
        """Load all settings, or an empty dict if none exist."""
        data = self._read_json()
        return data if isinstance(data, dict) else {}

    def save_all(self, settings: dict[str, Any]) -> None:
        self._write_json(settings)

    def get(self, key: str, default: Any = None) -> Any:
        return self.load_all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        settings = self.load_all()
        settings[key] = value
        self.save_all(settings)

    def delete(self, key: str) -> bool:
        """Delete a setting. Returns True if the key existed."""
        settings = self.load_all()
        if key in settings:
            del settings[key]
            self.save_all(settings)
            return True
        return False


_store: SettingsStore | None = None
_store_path: Path | None = None


def _get_store() -> SettingsStore:
    global _store, _store_path
    path = _resolve_settings_path()
    if _store is None or _store_path != path:
        _store = SettingsStore(file_path=path)
        _store_path = path
    return _store


def load_settings() -> dict:
    """Load app settings from config file."""
    return _get_store().load_all()
