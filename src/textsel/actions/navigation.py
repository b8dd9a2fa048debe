"""Cursor movement commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textsel.keymaps.resolver import ResolutionMatch
    from textsel.widget import TextSel


def move_up(view: "TextSel", match: "ResolutionMatch") -> str:
    del match
    view.move_up()
    return "move_up"


def move_down(view: "TextSel", match: "ResolutionMatch") -> str:
    del match
    view.move_down()
    return "move_down"


def move_left(view: "TextSel", match: "ResolutionMatch") -> str:
    del match
    view.move_left()
    return "move_left"


def move_right(view: "TextSel", match: "ResolutionMatch") -> str:
    del match
    view.move_right()
    return "move_right"


def move_to_line_start(view: "TextSel", match: "ResolutionMatch") -> str:
    del match
    view.move_to_start_of_line()
    return "line_start"


def move_to_line_end(view: "TextSel", match: "ResolutionMatch") -> str:
    del match
    view.move_to_end_of_line()
    return "line_end"


def move_to_first_line(view: "TextSel", match: "ResolutionMatch") -> str:
    del match
    view.move_to_first_line()
    return "first_line"


def move_to_last_line(view: "TextSel", match: "ResolutionMatch") -> str:
    del match
    view.move_to_last_line()
    return "last_line"


__all__ = [
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move_to_line_start",
    "move_to_line_end",
    "move_to_first_line",
    "move_to_last_line",
]
