from __future__ import annotations

import pytest

from textsel import TextSel


def make_view(text: str) -> TextSel:
    return TextSel().set_text(text)


def test_cursor_movements() -> None:
    view = make_view("Line 1\nLine 2\nLine 3")

    view.move_right()
    assert view.get_cursor_position() == (0, 1)

    view.move_down()
    assert view.get_cursor_position() == (1, 1)

    view.move_to_end_of_line()
    assert view.get_cursor_position() == (1, len("Line 2\n") - 1)


def test_move_down_changes_current_line() -> None:
    view = make_view("Hello, World!\nThis is a test.\nThis is only a test.\n")

    assert view.get_current_line() == "Hello, World!\n"
    view.move_down()
    assert view.get_current_line() == "This is a test.\n"
    view.move_right().move_right().move_right().move_right()
    assert view.get_current_line() == "This is a test.\n"


def test_move_right_wraps_and_stops_at_end() -> None:
    view = make_view("a\nb\n")
    positions = []
    for _ in range(4):
        view.move_right()
        positions.append(view.get_cursor_position())

    assert positions == [(0, 1), (1, 0), (1, 1), (1, 1)]


def test_move_left_at_origin_is_noop() -> None:
    view = make_view("abc")

    view.move_left().move_left()

    assert view.get_cursor_position() == (0, 0)


def test_move_left_wraps_to_previous_row_end() -> None:
    view = make_view("abc\nde").set_cursor_position(1, 0)

    view.move_left()

    assert view.get_cursor_position() == (0, 3)


def test_move_left_wraps_onto_empty_row() -> None:
    view = make_view("abc\n\nde").set_cursor_position(2, 0)

    view.move_left()

    assert view.get_cursor_position() == (1, 0)


def test_move_up_clamps_column_to_shorter_row() -> None:
    view = make_view("ab\nlonger line").set_cursor_position(1, 8)

    view.move_up()

    assert view.get_cursor_position() == (0, 2)


def test_move_down_onto_empty_row_forces_column_zero() -> None:
    view = make_view("abcdef\n\nxyz").set_cursor_position(0, 4)

    view.move_down()

    assert view.get_cursor_position() == (1, 0)


def test_vertical_moves_clamp_to_buffer() -> None:
    view = make_view("one\ntwo\n")

    view.move_up()
    assert view.get_cursor_position() == (0, 0)
    view.move_down().move_down().move_down()
    assert view.get_cursor_position() == (1, 0)


def test_line_start_and_end() -> None:
    view = make_view("Hello\nWorld").set_cursor_position(1, 2)

    view.move_to_end_of_line()
    assert view.get_cursor_position() == (1, 4)
    view.move_to_start_of_line()
    assert view.get_cursor_position() == (1, 0)


def test_end_of_empty_line_is_column_zero() -> None:
    view = make_view("a\n\nb").set_cursor_position(1, 0)

    view.move_to_end_of_line()

    assert view.get_cursor_position() == (1, 0)


def test_first_and_last_line_keep_column_when_it_fits() -> None:
    view = make_view("first line\nsecond line\nthird").set_cursor_position(1, 3)

    view.move_to_first_line()
    assert view.get_cursor_position() == (0, 3)
    view.move_to_last_line()
    assert view.get_cursor_position() == (2, 3)


def test_last_line_clamps_long_column() -> None:
    view = make_view("a much longer first line\nab").set_cursor_position(0, 10)

    view.move_to_last_line()

    assert view.get_cursor_position() == (1, 1)


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ((5, 0), (1, 0)),
        ((-3, 2), (0, 2)),
        ((0, 99), (0, 3)),
        ((1, -4), (1, 0)),
    ],
)
def test_set_cursor_position_clamps(
    target: tuple[int, int], expected: tuple[int, int]
) -> None:
    view = make_view("abc\nde\n")

    view.set_cursor_position(*target)

    assert view.get_cursor_position() == expected


def test_set_text_resets_cursor() -> None:
    view = make_view("abc\ndef\nghi").set_cursor_position(2, 2)

    view.set_text("x")

    assert view.get_cursor_position() == (0, 0)


def test_horizontal_walk_stays_in_bounds() -> None:
    text = "ab\n\n[red]cde[-]\nf\n"
    view = make_view(text)
    document = view.model.document

    for step in range(20):
        if step % 3 == 2:
            view.move_left()
        else:
            view.move_right()
        row, col = view.get_cursor_position()
        assert 0 <= row <= document.last_row
        assert 0 <= col <= document.line_length(row)
