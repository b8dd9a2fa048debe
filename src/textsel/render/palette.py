"""Overlay styles used to paint the cursor and the selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textsel.runtime.config import TextSelConfig


@dataclass(frozen=True, slots=True)
class Palette:
    """Document colours plus the overlay tags derived from them."""

    primary_text: str = "white"
    background: str = "black"
    secondary_text: str = "yellow"

    @classmethod
    def from_config(cls, config: "TextSelConfig") -> "Palette":
        return cls(
            primary_text=config.primary_text,
            background=config.background,
            secondary_text=config.secondary_text,
        )

    @property
    def default(self) -> str:
        return f"[{self.primary_text}:{self.background}:-]"

    @property
    def cursor(self) -> str:
        return f"[{self.background}:{self.primary_text}:-]"

    @property
    def selection(self) -> str:
        return f"[{self.background}:{self.secondary_text}:-]"

    @property
    def cursor_in_selection(self) -> str:
        return f"[{self.background}:{self.secondary_text}:bu]"

    def describe(self) -> dict[str, str]:
        return {
            "default": self.default,
            "cursor": self.cursor,
            "selection": self.selection,
            "cursor_in_selection": self.cursor_in_selection,
        }


__all__ = ["Palette"]
