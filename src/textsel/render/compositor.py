"""Re-serialize a tagged buffer with cursor and selection overlays."""

from __future__ import annotations

from typing import Iterator, Literal, Optional

from textsel.buffer.document import TextDocument
from textsel.buffer.model import CursorModel
from textsel.buffer.scanner import ScanCell
from textsel.buffer.styles import StyleState

from .palette import Palette

CursorEndRestore = Literal["document", "selection"]
CURSOR_END_RESTORE_CHOICES: tuple[str, ...] = ("document", "selection")

# Applied to the tracked style to drop the cursor-in-selection emphasis.
STRIP_ATTRIBUTES = "[::-]"


class HighlightCompositor:
    """Walks the scanner output and splices overlays into the raw text.

    Source tags are copied through unchanged except inside the selection,
    where they are swallowed so they cannot repaint the highlight. They are
    still tracked, so the style restored after an overlay is always the one
    the document would be showing at that point.

    When tags and an overlay opening fall on the same logical character, the
    tags are written first and the overlay style follows them.
    """

    def __init__(
        self,
        palette: Optional[Palette] = None,
        *,
        cursor_end_restore: CursorEndRestore = "document",
    ) -> None:
        if cursor_end_restore not in CURSOR_END_RESTORE_CHOICES:
            raise ValueError(f"Unknown cursor_end_restore '{cursor_end_restore}'.")
        self.palette = palette or Palette()
        self.cursor_end_restore = cursor_end_restore

    def render(self, model: CursorModel, *, show_cursor: bool = True) -> str:
        palette = self.palette
        selecting = model.is_selecting
        start, end = model.selection_range()
        cursor = model.cursor

        out: list[str] = []
        in_selection = False
        style = StyleState.default(palette)

        for cell in self._cells(model.document):
            for tag in cell.tags:
                if not in_selection:
                    out.append(tag)
                style = style.apply(tag)

            if selecting and cell.lands_on(start):
                in_selection = True
                out.append(palette.selection)

            visible = " \n" if cell.is_newline else cell.char
            if show_cursor and cell.lands_on(cursor):
                visible = visible or " "
                if in_selection:
                    out.append(palette.cursor_in_selection)
                    out.append(visible)
                    out.append(
                        self._close_cursor_in_selection(style, cell.lands_on(end))
                    )
                else:
                    out.append(palette.cursor)
                    out.append(visible)
                    out.append(style.render())
            else:
                out.append(visible)

            if in_selection and cell.lands_on(end):
                in_selection = False
                out.append(style.render())

        return "".join(out)

    @staticmethod
    def _cells(document: TextDocument) -> Iterator[ScanCell]:
        """Document cells, closed by an empty cell after the last character.

        Trailing tags already yield that cell. Otherwise one is added when the
        final row has no newline, so a cursor at the row length has a place
        to be painted.
        """

        last: Optional[ScanCell] = None
        for cell in document.cells():
            yield cell
            last = cell
        if last is None or last.is_terminal or last.is_newline:
            return
        yield ScanCell("", last.row, last.col + 1, last.offset + 1)

    def _close_cursor_in_selection(self, style: StyleState, at_end: bool) -> str:
        if not at_end or self.cursor_end_restore == "selection":
            return self.palette.selection
        return style.apply(STRIP_ATTRIBUTES).render()


__all__ = [
    "CURSOR_END_RESTORE_CHOICES",
    "CursorEndRestore",
    "HighlightCompositor",
    "STRIP_ATTRIBUTES",
]
