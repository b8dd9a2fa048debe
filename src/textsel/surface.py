"""Boundary between the widget core and whatever paints its output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class DisplaySurface(Protocol):
    """Host capability that receives the tagged text and owns painting."""

    def set_text(self, text: str) -> None:
        """Replace the displayed, tagged text."""
        ...

    def has_focus(self) -> bool:
        """Whether the host currently routes input to this widget."""
        ...


@dataclass(slots=True)
class MemorySurface:
    """Headless surface that keeps every frame it is handed."""

    focused: bool = True
    text: str = ""
    frames: list[str] = field(default_factory=list)

    def set_text(self, text: str) -> None:
        self.text = text
        self.frames.append(text)

    def has_focus(self) -> bool:
        return self.focused


__all__ = ["DisplaySurface", "MemorySurface"]
