"""Tag-aware scanning of raw buffers into logical (row, column) cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .styles import TAG_PATTERN, match_tag

Position = tuple[int, int]  # (row, column)


@dataclass(frozen=True, slots=True)
class ScanCell:
    """One logical character plus the tags consumed right before it."""

    char: str
    row: int
    col: int
    offset: int
    tags: tuple[str, ...] = ()

    @property
    def is_terminal(self) -> bool:
        """True for the empty cell sitting after the last character."""

        return self.char == ""

    @property
    def is_newline(self) -> bool:
        return self.char == "\n"

    def lands_on(self, position: Position) -> bool:
        """Whether a cursor or selection boundary at ``position`` sits here.

        A column past the end of a row lands on the cell closing that row:
        its newline, or the terminal cell after the final character. Row
        lengths count the newline, so vertical moves can leave a column one
        past it; an empty row is the case where the newline is at column 0.
        """

        row, col = position
        if self.row != row:
            return False
        if self.col == col:
            return True
        return (self.is_newline or self.is_terminal) and col > self.col


def iter_cells(text: str, start: int = 0) -> Iterator[ScanCell]:
    """Yield a cell per logical character of ``text`` from offset ``start``.

    Tags are zero-width: they are collected onto the following cell and never
    advance the column. Trailing tags are carried by a final terminal cell.
    """

    row = 0
    col = 0
    idx = start
    length = len(text)
    while idx < length:
        tags: list[str] = []
        tag = match_tag(text, idx)
        while tag is not None:
            tags.append(tag)
            idx += len(tag)
            tag = match_tag(text, idx)

        if idx >= length:
            if tags:
                yield ScanCell("", row, col, idx, tuple(tags))
            return

        char = text[idx]
        yield ScanCell(char, row, col, idx, tuple(tags))
        if char == "\n":
            row += 1
            col = 0
        else:
            col += 1
        idx += 1


def strip_tags(text: str) -> str:
    return TAG_PATTERN.sub("", text)


def last_row(text: str) -> int:
    """Index of the final selectable row; a trailing newline adds none."""

    count = text.count("\n")
    if text.endswith("\n"):
        count -= 1
    return count


__all__ = ["Position", "ScanCell", "iter_cells", "last_row", "strip_tags"]
