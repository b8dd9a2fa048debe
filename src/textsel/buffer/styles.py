"""Inline style tags and the running style they describe."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textsel.render.palette import Palette

TAG_PATTERN = re.compile(r"\[[-:a-zA-Z0-9]+\]")

RESET = "-"


def match_tag(text: str, pos: int = 0) -> str | None:
    """Return the style tag starting exactly at ``pos``, if any."""

    found = TAG_PATTERN.match(text, pos)
    return found.group(0) if found else None


def split_tag(tag: str) -> list[str]:
    return tag.lstrip("[").rstrip("]").split(":")


@dataclass(frozen=True, slots=True)
class StyleState:
    """Foreground, background and attributes active at one scan position.

    ``default_*`` fields remember the document defaults so ``-`` slots and the
    implicit resets of :meth:`apply` know what to fall back to.
    """

    foreground: str
    background: str
    attributes: str = ""
    default_foreground: str = "white"
    default_background: str = "black"

    @classmethod
    def default(cls, palette: "Palette | None" = None) -> "StyleState":
        if palette is None:
            return cls(foreground="white", background="black")
        return cls(
            foreground=palette.primary_text,
            background=palette.background,
            default_foreground=palette.primary_text,
            default_background=palette.background,
        )

    def apply(self, tag: str) -> "StyleState":
        """Return the style in effect after ``tag``.

        Any tag resets background and attributes before its later slots are
        read, so ``[red]`` drops an earlier ``[:blue:b]``.
        """

        parts = split_tag(tag)
        fg, bg, attrs = self.foreground, self.background, self.attributes

        fg = self._resolve(parts[0], fg, self.default_foreground)
        bg = self.default_background
        attrs = ""

        if len(parts) > 1:
            bg = self._resolve(parts[1], bg, self.default_background)
            attrs = ""

        if len(parts) > 2:
            attrs = self._resolve(parts[2], attrs, "")

        return replace(self, foreground=fg, background=bg, attributes=attrs)

    def render(self) -> str:
        """Serialize as ``[fg:bg:attrs]``, never writing ``-``.

        No attributes render as an empty slot. That is exact rather than
        inheriting: the foreground and background slots are always present,
        and each one resets attributes before the third slot is read, so
        applying the result to any state reproduces this one.
        """

        return f"[{self.foreground}:{self.background}:{self.attributes}]"

    @staticmethod
    def _resolve(slot: str, current: str, default: str) -> str:
        if slot == "":
            return current
        if slot == RESET:
            return default
        return slot.lower()


__all__ = ["StyleState", "TAG_PATTERN", "match_tag", "split_tag"]
