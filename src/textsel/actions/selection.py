"""Selection commands: start/stop, commit and cancel."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textsel.keymaps.resolver import ResolutionMatch
    from textsel.widget import TextSel


def toggle_selection(view: "TextSel", match: "ResolutionMatch") -> str:
    del match
    view.toggle_selection()
    return "selection_start" if view.is_selecting else "selection_stop"


def commit_selection(view: "TextSel", match: "ResolutionMatch") -> str:
    del match
    view.finish_selection()
    return "selection_commit"


def cancel_selection(view: "TextSel", match: "ResolutionMatch") -> str:
    del match
    view.reset_selection()
    return "selection_cancel"


__all__ = ["toggle_selection", "commit_selection", "cancel_selection"]
