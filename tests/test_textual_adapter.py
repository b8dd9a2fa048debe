from __future__ import annotations

from typing import List

from rich.text import Text

from textsel.adapters.textual import TextSelAdapter, TextualUIHooks, to_rich_text
from textsel.runtime.config import TextSelConfig


def make_adapter(
    frames: List[Text],
    statuses: List[str] | None = None,
    logs: List[str] | None = None,
    focused: bool = True,
) -> TextSelAdapter:
    hooks = TextualUIHooks(
        update_text=frames.append,
        has_focus=lambda: focused,
        update_status=(statuses if statuses is not None else []).append,
        log=(logs if logs is not None else []).append,
    )
    return TextSelAdapter(hooks)


def test_adapter_paints_rich_text_without_tags() -> None:
    frames: List[Text] = []
    adapter = make_adapter(frames)

    adapter.view.set_text("[red]ab[-]c")

    assert frames[-1].plain == "abc"
    assert adapter.surface.text.startswith("[red][black:white:-]a")


def test_adapter_updates_status_for_consumed_keys() -> None:
    frames: List[Text] = []
    statuses: List[str] = []
    adapter = make_adapter(frames, statuses)
    adapter.view.set_text("Hello")

    adapter.handle_textual_key("l", text="l")
    adapter.handle_textual_key(" ", text=" ")
    adapter.handle_textual_key("SPACE", text=" ")

    assert statuses == ["move_right", "selection_start"]
    assert adapter.view.is_selecting


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter([], logs=logs)
    adapter.view.set_text("Hello")

    adapter.handle_textual_key("RIGHT")

    assert any(line.startswith("key ->") for line in logs)
    assert any("action='cursor.right'" in line for line in logs)


def test_adapter_hides_cursor_without_focus() -> None:
    frames: List[Text] = []
    adapter = make_adapter(frames, focused=False)

    adapter.view.set_text("ab")
    adapter.focus_changed()

    assert adapter.surface.text == "ab"


def test_adapter_respects_config() -> None:
    hooks = TextualUIHooks(update_text=lambda text: None, has_focus=lambda: False)
    adapter = TextSelAdapter(hooks, config=TextSelConfig(show_cursor_unfocused=True))

    adapter.view.set_text("ab")

    assert adapter.surface.text == "[black:white:-]a[white:black:]b"


def test_to_rich_text_replays_styles() -> None:
    text = to_rich_text("[red]ab[-:blue:bu]c")

    assert text.plain == "abc"
    first, second = text.spans
    assert (first.start, first.end) == (0, 2)
    assert first.style.color.name == "red"
    assert first.style.bgcolor.name == "black"
    assert (second.start, second.end) == (2, 3)
    assert second.style.color.name == "white"
    assert second.style.bgcolor.name == "blue"
    assert second.style.bold and second.style.underline


def test_to_rich_text_ignores_unknown_colours() -> None:
    text = to_rich_text("[nosuchcolour]x")

    assert text.plain == "x"
    assert text.spans[0].style.color is None
