"""Textual host for the textsel widget."""

from .controller import HookSurface, TextSelAdapter, TextualUIHooks
from .markup import to_rich_text

__all__ = ["HookSurface", "TextSelAdapter", "TextualUIHooks", "to_rich_text"]
