from __future__ import annotations

from textsel import MemorySurface, TextSel
from textsel.runtime.config import TextSelConfig


def make_view(text: str, *, focused: bool = True, **config: object) -> TextSel:
    surface = MemorySurface(focused=focused)
    view = TextSel(surface, config=TextSelConfig().with_overrides(**config))
    return view.set_text(text)


def test_cursor_at_start() -> None:
    view = make_view("Hello World")

    assert view.rendered == "[black:white:-]H[white:black:]ello World"


def test_cursor_at_end_of_last_line() -> None:
    view = make_view("Hello\nWorld")

    view.move_down().move_right().move_right().move_right().move_right()

    assert view.rendered == "Hello \nWorl[black:white:-]d[white:black:]"


def test_selection_with_cursor_on_selection_end() -> None:
    view = make_view("Hello\nWorld")

    view.start_selection()
    for _ in range(5):
        view.move_right()

    assert view.rendered == (
        "[black:yellow:-]Hello[black:yellow:bu] \n[white:black:][white:black:]World"
    )


def test_selection_end_restore_can_use_selection_style() -> None:
    view = make_view("Hello\nWorld", cursor_end_restore="selection")

    view.start_selection()
    for _ in range(5):
        view.move_right()

    assert view.rendered == (
        "[black:yellow:-]Hello[black:yellow:bu] \n[black:yellow:-][white:black:]World"
    )


def test_cursor_inside_selection_resumes_selection_style() -> None:
    view = make_view("abcd").set_cursor_position(0, 3)

    view.start_selection().move_left().move_left()

    assert view.rendered == (
        "a[black:yellow:-][black:yellow:bu]b[black:yellow:-]cd[white:black:]"
    )


def test_unfocused_view_hides_cursor() -> None:
    view = make_view("a\nb", focused=False)

    assert view.rendered == "a \nb"


def test_cursor_can_be_forced_visible_without_focus() -> None:
    view = make_view("ab", focused=False, show_cursor_unfocused=True)

    assert view.rendered == "[black:white:-]a[white:black:]b"


def test_focus_change_is_picked_up_on_refresh() -> None:
    surface = MemorySurface(focused=False)
    view = TextSel(surface).set_text("ab")
    assert surface.text == "ab"

    surface.focused = True
    view.refresh()

    assert surface.text == "[black:white:-]a[white:black:]b"


def test_source_tags_pass_through_before_cursor_overlay() -> None:
    view = make_view("[red]ab[-]")

    assert view.rendered == "[red][black:white:-]a[red:black:]b[-]"


def test_tags_inside_selection_are_suppressed_but_tracked() -> None:
    view = make_view("ab[red]cd")

    view.start_selection().move_right().move_right().move_right()

    assert view.rendered == (
        "[black:yellow:-]abc[black:yellow:bu]d[red:black:][red:black:]"
    )


def test_tag_at_selection_start_is_written_before_selection_style() -> None:
    view = make_view("[red]abc")

    view.start_selection()

    assert view.rendered == (
        "[red][black:yellow:-][black:yellow:bu]a[red:black:][red:black:]bc"
    )


def test_cursor_on_empty_line_is_visible() -> None:
    view = make_view("ab\n\ncd").set_cursor_position(1, 0)

    assert view.rendered == "ab \n[black:white:-] \n[white:black:]cd"


def test_cursor_column_past_empty_line_lands_on_it() -> None:
    view = make_view("abc\n\nx").set_cursor_position(0, 1)

    view.move_down()

    assert view.get_cursor_position() == (1, 1)
    assert view.rendered == "abc \n[black:white:-] \n[white:black:]x"


def test_refresh_is_idempotent() -> None:
    surface = MemorySurface()
    view = TextSel(surface).set_text("[green]one\ntwo").start_selection().move_down()
    first = view.rendered

    view.refresh().refresh()

    assert view.rendered == first
    assert surface.frames[-1] == first
    assert surface.frames[-2] == first


def test_custom_palette_colours() -> None:
    view = make_view("ab", primary_text="green", background="navy")

    assert view.rendered == "[navy:green:-]a[green:navy:]b"


def test_cursor_past_newline_closes_selection_on_it() -> None:
    view = make_view("abcdef\nab\nxyz").set_cursor_position(0, 3)

    view.start_selection().move_down()

    assert view.rendered == (
        "abc[black:yellow:-]def \nab[black:yellow:bu] \n"
        "[white:black:][white:black:]xyz"
    )


def test_cursor_after_last_character_is_painted() -> None:
    view = make_view("abcdef\nab\nxyz").set_cursor_position(0, 3)

    view.move_down().start_selection().move_down()

    assert view.get_cursor_position() == (2, 3)
    assert view.rendered == (
        "abcdef \nab[black:yellow:-] \nxyz[black:yellow:bu] "
        "[white:black:][white:black:]"
    )


def test_cursor_at_row_length_on_last_line() -> None:
    view = make_view("Hello\nWorld")

    view.move_to_end_of_line().move_down()

    assert view.get_cursor_position() == (1, 5)
    assert view.rendered == "Hello \nWorld[black:white:-] [white:black:]"


def test_cursor_on_trailing_tags_is_painted() -> None:
    view = make_view("ab[-]").set_cursor_position(0, 2)

    assert view.rendered == "ab[-][black:white:-] [white:black:]"
