"""Shared pytest fixtures for micromotion tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_TEST_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="micromotion-test-config-"))
os.environ.setdefault("MICROMOTION_CONFIG_DIR", str(_TEST_CONFIG_DIR))
os.environ.pop("MICROMOTION_SETTINGS_PATH", None)


@pytest.fixture(autouse=True)
def _reset_keymap():
    """Ensure a custom keymap does not leak between tests."""
    from micromotion.core.keymap import reset_keymap

    reset_keymap()
    yield
    reset_keymap()


@pytest.fixture
def settings_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings store at a temporary file."""
    path = tmp_path / "settings.json"
    monkeypatch.setenv("MICROMOTION_SETTINGS_PATH", str(path))
    return path
