"""Built-in keymap: arrows, vi-style letters and the selection keys."""

from __future__ import annotations

from typing import Iterable, Sequence

from textsel.actions import navigation as nav_actions
from textsel.actions import selection as selection_actions

from .models import ActionRef, Binding, WhenClause
from .registry import KeymapRegistry

SELECTING = WhenClause("selecting")

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef("cursor.up", nav_actions.move_up, "Move the cursor up"),
    ActionRef("cursor.down", nav_actions.move_down, "Move the cursor down"),
    ActionRef("cursor.left", nav_actions.move_left, "Move the cursor left"),
    ActionRef("cursor.right", nav_actions.move_right, "Move the cursor right"),
    ActionRef(
        "cursor.line_start", nav_actions.move_to_line_start, "Jump to line start"
    ),
    ActionRef("cursor.line_end", nav_actions.move_to_line_end, "Jump to line end"),
    ActionRef(
        "cursor.first_line", nav_actions.move_to_first_line, "Jump to the first line"
    ),
    ActionRef(
        "cursor.last_line", nav_actions.move_to_last_line, "Jump to the last line"
    ),
    ActionRef(
        "selection.toggle",
        selection_actions.toggle_selection,
        "Start or stop selecting",
    ),
    ActionRef(
        "selection.commit",
        selection_actions.commit_selection,
        "Hand the selection to the select callback",
    ),
    ActionRef(
        "selection.cancel",
        selection_actions.cancel_selection,
        "Drop the current selection",
    ),
)

_KEYS: tuple[tuple[str, str, str], ...] = (
    ("arrow.up", "UP", "cursor.up"),
    ("arrow.down", "DOWN", "cursor.down"),
    ("arrow.left", "LEFT", "cursor.left"),
    ("arrow.right", "RIGHT", "cursor.right"),
    ("vi.up", "k", "cursor.up"),
    ("vi.down", "j", "cursor.down"),
    ("vi.left", "h", "cursor.left"),
    ("vi.right", "l", "cursor.right"),
    ("vi.line_start", "^", "cursor.line_start"),
    ("vi.line_end", "$", "cursor.line_end"),
    ("vi.first_line", "g", "cursor.first_line"),
    ("vi.last_line", "G", "cursor.last_line"),
    ("key.home", "HOME", "cursor.line_start"),
    ("key.end", "END", "cursor.line_end"),
    ("selection.toggle", "SPACE", "selection.toggle"),
    ("selection.commit", "ENTER", "selection.commit"),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding.for_key(binding_id, key, action_id) for binding_id, key, action_id in _KEYS
) + (
    Binding.for_key(
        "selection.cancel",
        "ESC",
        "selection.cancel",
        description="Escape drops an active selection",
        when=(SELECTING,),
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
    overrides: Iterable[Binding] = (),
) -> KeymapRegistry:
    """Register the default actions and (filtered) bindings on ``registry``.

    ``overrides`` are registered last with ``replace=True``, so they win any
    conflict with a default binding on the same key.
    """

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=True)

    include = set(include_bindings) if include_bindings else None
    exclude = set(exclude_bindings or ())
    for binding in DEFAULT_BINDINGS:
        if include is not None and binding.id not in include:
            continue
        if binding.id in exclude:
            continue
        registry.register_binding(binding)

    for binding in overrides:
        registry.register_binding(binding, replace=True)

    return registry


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "SELECTING", "load_default_keymaps"]
