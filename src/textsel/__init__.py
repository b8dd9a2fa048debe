"""Keyboard-driven cursor and text selection for tagged terminal text."""

from .surface import DisplaySurface, MemorySurface
from .widget import TextSel

__all__ = [
    "DisplaySurface",
    "MemorySurface",
    "TextSel",
    "adapters",
    "actions",
    "buffer",
    "keymaps",
    "render",
    "runtime",
]

__version__ = "0.1.0"
