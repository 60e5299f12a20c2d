"""micromotion - Micro-style word motions for text editors."""

import logging
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Any

__all__ = [
    "__version__",
    "main",
    "MicroMotionApp",
    "compute_word_left",
    "compute_word_right",
]

try:
    __version__ = version("micromotion")
except PackageNotFoundError:
    __version__ = "0.0.0.dev"

logging.getLogger(__name__).addHandler(logging.NullHandler())

if TYPE_CHECKING:
    from .app import MicroMotionApp
    from .cli import main
    from .editing import compute_word_left, compute_word_right


def __getattr__(name: str) -> Any:
    """Lazy import for heavy modules to keep package import side-effect free."""
    if name == "main":
        from .cli import main

        return main
    if name == "MicroMotionApp":
        from .app import MicroMotionApp

        return MicroMotionApp
    if name in ("compute_word_left", "compute_word_right"):
        from . import editing

        return getattr(editing, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
