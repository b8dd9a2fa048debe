"""Cursor and selection bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field

from .scanner import Position

ORIGIN: Position = (0, 0)


@dataclass(slots=True)
class SelectionState:
    """Selection anchors; ``focus`` follows the cursor while selecting."""

    is_selecting: bool = False
    anchor: Position = ORIGIN
    focus: Position = ORIGIN

    def start(self, at: Position) -> None:
        self.is_selecting = True
        self.anchor = at
        self.focus = at

    def extend(self, to: Position) -> None:
        if self.is_selecting:
            self.focus = to

    def clear(self) -> None:
        self.is_selecting = False
        self.anchor = ORIGIN
        self.focus = ORIGIN

    def normalized(self) -> tuple[Position, Position]:
        """Return ``(anchor, focus)`` ordered by reading position."""

        if self.anchor <= self.focus:
            return self.anchor, self.focus
        return self.focus, self.anchor


@dataclass(slots=True)
class CursorState:
    cursor: Position = ORIGIN
    selection: SelectionState = field(default_factory=SelectionState)

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)


__all__ = ["CursorState", "ORIGIN", "SelectionState"]
