from __future__ import annotations

from textsel.buffer import StyleState, match_tag
from textsel.render import Palette


def test_default_style_uses_palette_colours() -> None:
    state = StyleState.default(Palette(primary_text="green", background="navy"))

    assert state.foreground == "green"
    assert state.background == "navy"
    assert state.attributes == ""


def test_render_uses_resolved_values() -> None:
    state = StyleState(foreground="red", background="blue", attributes="b")

    assert state.render() == "[red:blue:b]"


def test_foreground_only_tag_resets_background_and_attributes() -> None:
    state = StyleState.default().apply("[red:yellow:b]").apply("[green]")

    assert state.foreground == "green"
    assert state.background == "black"
    assert state.attributes == ""


def test_empty_slots_keep_foreground() -> None:
    updated = StyleState.default().apply("[green::]")

    assert updated.render() == "[green:black:]"


def test_explicit_triple() -> None:
    updated = StyleState.default().apply("[red:yellow:b]")

    assert (updated.foreground, updated.background, updated.attributes) == (
        "red",
        "yellow",
        "b",
    )


def test_reset_slots_fall_back_to_defaults() -> None:
    updated = StyleState.default().apply("[red:yellow:b]").apply("[-:-:-]")

    assert updated.render() == "[white:black:]"


def test_background_and_attributes_without_foreground() -> None:
    updated = StyleState.default().apply("[:-:i]")

    assert updated.render() == "[white:black:i]"


def test_background_slot_resets_attributes_even_when_empty() -> None:
    state = StyleState(foreground="red", background="blue", attributes="u")

    updated = state.apply("[:blue]")

    assert updated.render() == "[red:blue:]"


def test_strip_attributes_keeps_foreground() -> None:
    state = StyleState.default().apply("[red:yellow:bu]")

    assert state.apply("[::-]").render() == "[red:black:]"


def test_explicit_names_are_lower_cased() -> None:
    assert StyleState.default().apply("[RED]").foreground == "red"


def test_extra_slots_are_ignored() -> None:
    updated = StyleState.default().apply("[red:blue:b:extra]")

    assert updated.render() == "[red:blue:b]"


def test_match_tag_only_at_position() -> None:
    assert match_tag("[red]abc") == "[red]"
    assert match_tag("a[red]bc") is None
    assert match_tag("a[red]bc", 1) == "[red]"
    assert match_tag("[#ff0000]x") is None
    assert match_tag("[]x") is None


def test_rendered_tag_replaces_any_attributes() -> None:
    plain = StyleState.default().apply("[red:blue]")
    emphasized = StyleState(foreground="black", background="yellow", attributes="bu")

    assert plain.render() == "[red:blue:]"
    assert emphasized.apply(plain.render()) == plain
    assert plain.apply(emphasized.render()) == emphasized
