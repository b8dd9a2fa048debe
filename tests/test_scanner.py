from __future__ import annotations

import pytest

from textsel.buffer import TAG_PATTERN, TextDocument, iter_cells, last_row, strip_tags


def test_tags_are_zero_width() -> None:
    cells = list(iter_cells("[red]ab[-]c"))

    assert [(c.char, c.row, c.col) for c in cells] == [
        ("a", 0, 0),
        ("b", 0, 1),
        ("c", 0, 2),
    ]
    assert cells[0].tags == ("[red]",)
    assert cells[2].tags == ("[-]",)
    assert cells[2].offset == 10


def test_consecutive_tags_collect_on_one_cell() -> None:
    cells = list(iter_cells("[red][::b]x"))

    assert cells[0].tags == ("[red]", "[::b]")


def test_newline_advances_row() -> None:
    cells = list(iter_cells("ab\ncd"))

    assert [(c.row, c.col) for c in cells] == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1)]


def test_trailing_tags_use_terminal_cell() -> None:
    cells = list(iter_cells("ab[-]"))

    assert cells[-1].is_terminal
    assert cells[-1].tags == ("[-]",)
    assert (cells[-1].row, cells[-1].col) == (0, 2)


def test_no_terminal_cell_without_trailing_tags() -> None:
    assert not any(cell.is_terminal for cell in iter_cells("ab\n"))


def test_scan_from_offset() -> None:
    cells = list(iter_cells("xx[red]y", start=2))

    assert [(c.char, c.offset, c.tags) for c in cells] == [("y", 7, ("[red]",))]


def test_unclosed_bracket_is_plain_text() -> None:
    assert "".join(c.char for c in iter_cells("[red")) == "[red"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0),
        ("abc", 0),
        ("abc\n", 0),
        ("a\nb", 1),
        ("a\nb\n", 1),
        ("a\n\n", 1),
        ("\n", 0),
    ],
)
def test_last_row_ignores_final_newline(text: str, expected: int) -> None:
    assert last_row(text) == expected


def test_strip_tags_leaves_no_tags() -> None:
    stripped = strip_tags("[red:blue:b]Hello[-], [::u]World[-:-:-]!")

    assert stripped == "Hello, World!"
    assert TAG_PATTERN.search(stripped) is None


def test_document_lines_keep_newlines() -> None:
    document = TextDocument("[red]Hello[-]\n\nWorld")

    assert document.lines() == ["Hello\n", "\n", "World"]
    assert document.line_length(0) == 6
    assert document.line(7) == ""
    assert document.last_row == 2


def test_document_lines_match_scanner_rows() -> None:
    raw = "a[red]b\n[::b]cd\ne"
    document = TextDocument(raw)

    for row, line in enumerate(document.lines()):
        scanned = "".join(c.char for c in iter_cells(raw) if c.row == row)
        assert scanned == line


def test_empty_document_has_one_empty_row() -> None:
    document = TextDocument()

    assert document.lines() == [""]
    assert document.line_length(0) == 0


def test_column_past_newline_lands_on_it() -> None:
    newline = list(iter_cells("ab\ncd"))[2]

    assert newline.lands_on((0, 2))
    assert newline.lands_on((0, 3))
    assert not newline.lands_on((0, 1))
    assert not newline.lands_on((1, 3))


def test_column_past_last_character_lands_on_terminal_cell() -> None:
    *chars, terminal = iter_cells("ab[-]")

    assert terminal.lands_on((0, 2))
    assert terminal.lands_on((0, 3))
    assert not chars[-1].lands_on((0, 2))
