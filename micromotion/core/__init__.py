"""UI-agnostic core definitions."""
