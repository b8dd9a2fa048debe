"""Cursor and selection overlays for tagged text."""

from .compositor import CursorEndRestore, HighlightCompositor
from .palette import Palette

__all__ = ["CursorEndRestore", "HighlightCompositor", "Palette"]
