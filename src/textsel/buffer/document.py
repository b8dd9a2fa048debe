"""Read-only view over a raw, tagged text buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .scanner import ScanCell, iter_cells, last_row, strip_tags


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Raw buffer text with logical-row helpers.

    Rows keep their trailing newline, so the length of ``"Hello\\n"`` is 6.
    Rows are extracted through :func:`iter_cells`, the same scan the
    compositor uses, and cached on first access.
    """

    raw: str = ""
    _lines: list[str] = field(default_factory=list, repr=False, compare=False)

    @property
    def last_row(self) -> int:
        return last_row(self.raw)

    def cells(self) -> Iterator[ScanCell]:
        return iter_cells(self.raw)

    def lines(self) -> list[str]:
        if not self._lines:
            self._lines.extend(self._split_rows())
        return self._lines

    def line(self, row: int) -> str:
        lines = self.lines()
        if 0 <= row < len(lines):
            return lines[row]
        return ""

    def line_length(self, row: int) -> int:
        return len(self.line(row))

    def plain_text(self) -> str:
        return strip_tags(self.raw)

    def _split_rows(self) -> list[str]:
        rows: list[list[str]] = [[]]
        for cell in self.cells():
            while cell.row >= len(rows):
                rows.append([])
            rows[cell.row].append(cell.char)
        return ["".join(chars) for chars in rows]


__all__ = ["TextDocument"]
