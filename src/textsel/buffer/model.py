"""Cursor navigation and selection over a tagged buffer."""

from __future__ import annotations

from typing import Callable, Optional

from .document import TextDocument
from .scanner import Position
from .state import ORIGIN, CursorState

SelectFunc = Callable[[str], None]


class CursorModel:
    """Owns the cursor and selection for one :class:`TextDocument`.

    Every movement is clamp-based: it never leaves the buffer and never
    raises. While a selection is active each movement drags its focus along.
    """

    def __init__(self, document: Optional[TextDocument] = None) -> None:
        self.document = document or TextDocument()
        self.state = CursorState()

    @property
    def cursor(self) -> Position:
        return self.state.cursor

    @property
    def is_selecting(self) -> bool:
        return self.state.selection.is_selecting

    def replace_document(self, document: TextDocument) -> None:
        self.document = document
        self.reset_cursor()

    def current_line(self) -> str:
        return self.document.line(self.cursor[0])

    # -- movement ---------------------------------------------------------

    def set_cursor_position(self, row: int, col: int) -> None:
        row = max(0, min(row, self.document.last_row))
        col = self._fit_column(row, max(0, col))
        self._move_to(row, col)

    def move_up(self) -> None:
        row, col = self.cursor
        if row > 0:
            row -= 1
            col = self._fit_column(row, col)
        self._move_to(row, col)

    def move_down(self) -> None:
        row, col = self.cursor
        if row < self.document.last_row:
            row += 1
            col = self._fit_column(row, col)
        self._move_to(row, col)

    def move_left(self) -> None:
        row, col = self.cursor
        if col > 0:
            col -= 1
        elif row > 0:
            row -= 1
            col = self._last_column(row)
        self._move_to(row, col)

    def move_right(self) -> None:
        row, col = self.cursor
        if col < self.document.line_length(row) - 1:
            col += 1
        elif row < self.document.last_row:
            row += 1
            col = 0
        self._move_to(row, col)

    def move_to_start_of_line(self) -> None:
        self._move_to(self.cursor[0], 0)

    def move_to_end_of_line(self) -> None:
        row = self.cursor[0]
        self._move_to(row, self._last_column(row))

    def move_to_first_line(self) -> None:
        self._move_to_row(0)

    def move_to_last_line(self) -> None:
        self._move_to_row(self.document.last_row)

    def reset_cursor(self) -> None:
        self.state.set_cursor(*ORIGIN)
        self.reset_selection()

    # -- selection --------------------------------------------------------

    def start_selection(self) -> None:
        self.state.selection.start(self.cursor)

    def reset_selection(self) -> None:
        self.state.selection.clear()

    def finish_selection(self, callback: Optional[SelectFunc] = None) -> str:
        """Hand the selected text to ``callback`` and clear the selection."""

        text = self.selected_text()
        if callback is not None:
            callback(text)
        self.reset_selection()
        return text

    def selection_range(self) -> tuple[Position, Position]:
        return self.state.selection.normalized()

    def selected_text(self) -> str:
        if not self.is_selecting:
            return ""
        start, end = self.selection_range()
        collected: list[str] = []
        inside = False
        for cell in self.document.cells():
            if cell.lands_on(start):
                inside = True
            if inside:
                collected.append(cell.char)
            if cell.lands_on(end):
                break
        return "".join(collected)

    # -- helpers ----------------------------------------------------------

    def _move_to(self, row: int, col: int) -> None:
        self.state.set_cursor(row, col)
        self.state.selection.extend(self.cursor)

    def _move_to_row(self, row: int) -> None:
        col = self.cursor[1]
        self._move_to(row, col)
        if col > self.document.line_length(row):
            self.move_to_end_of_line()

    def _last_column(self, row: int) -> int:
        return max(self.document.line_length(row) - 1, 0)

    def _fit_column(self, row: int, col: int) -> int:
        if col > self.document.line_length(row):
            return self._last_column(row)
        return col


__all__ = ["CursorModel", "SelectFunc"]
