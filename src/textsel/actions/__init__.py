"""Command handlers bound to keys by the default keymap."""

from .navigation import (
    move_down,
    move_left,
    move_right,
    move_to_first_line,
    move_to_last_line,
    move_to_line_end,
    move_to_line_start,
    move_up,
)
from .selection import cancel_selection, commit_selection, toggle_selection

__all__ = [
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move_to_line_start",
    "move_to_line_end",
    "move_to_first_line",
    "move_to_last_line",
    "toggle_selection",
    "commit_selection",
    "cancel_selection",
]
