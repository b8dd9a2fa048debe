"""Convert ``[fg:bg:attrs]`` tagged text into ``rich.text.Text``."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from rich.color import Color, ColorParseError
from rich.style import Style
from rich.text import Text

from textsel.buffer.styles import TAG_PATTERN, StyleState
from textsel.render.palette import Palette

ATTRIBUTE_FLAGS = {
    "b": "bold",
    "i": "italic",
    "u": "underline",
    "d": "dim",
    "l": "blink",
    "r": "reverse",
    "s": "strike",
}


def _color(name: str) -> Optional[Color]:
    try:
        return Color.parse(name)
    except ColorParseError:
        return None


@lru_cache(maxsize=256)
def style_for(foreground: str, background: str, attributes: str) -> Style:
    flags = {
        ATTRIBUTE_FLAGS[letter]: True
        for letter in attributes
        if letter in ATTRIBUTE_FLAGS
    }
    return Style(color=_color(foreground), bgcolor=_color(background), **flags)


def to_rich_text(tagged: str, palette: Optional[Palette] = None) -> Text:
    """Paint ``tagged`` by replaying its tags through :class:`StyleState`."""

    state = StyleState.default(palette or Palette())
    text = Text(end="")
    position = 0
    for found in TAG_PATTERN.finditer(tagged):
        if found.start() > position:
            text.append(tagged[position : found.start()], _style(state))
        state = state.apply(found.group(0))
        position = found.end()
    if position < len(tagged):
        text.append(tagged[position:], _style(state))
    return text


def _style(state: StyleState) -> Style:
    return style_for(state.foreground, state.background, state.attributes)


__all__ = ["ATTRIBUTE_FLAGS", "style_for", "to_rich_text"]
