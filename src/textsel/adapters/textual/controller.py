"""Textual-facing bridge: hook-backed surface plus key routing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from rich.text import Text

from textsel.keymaps import DispatchResult, KeyDispatcher, KeyInput, KeymapResolver
from textsel.render.palette import Palette
from textsel.runtime.config import TextSelConfig
from textsel.runtime.diagnostics import DiagnosticSink
from textsel.widget import TextSel

from .markup import to_rich_text


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def _focused() -> bool:  # pragma: no cover - default hook
    return True


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to reach Textual widgets."""

    update_text: Callable[[Text], None]
    has_focus: Callable[[], bool] = _focused
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class HookSurface:
    """:class:`~textsel.surface.DisplaySurface` that paints through hooks."""

    def __init__(self, hooks: TextualUIHooks, palette: Palette) -> None:
        self.hooks = hooks
        self.palette = palette
        self.text = ""

    def set_text(self, text: str) -> None:
        self.text = text
        self.hooks.update_text(to_rich_text(text, self.palette))

    def has_focus(self) -> bool:
        return bool(self.hooks.has_focus())


class TextSelAdapter:
    """Owns a :class:`TextSel` painted through ``hooks`` and feeds it keys."""

    def __init__(
        self,
        hooks: TextualUIHooks,
        *,
        config: Optional[TextSelConfig] = None,
        resolver: Optional[KeymapResolver] = None,
        diagnostics: Optional[DiagnosticSink] = None,
    ) -> None:
        self.hooks = hooks
        config = config or TextSelConfig()
        palette = Palette.from_config(config)
        self.surface = HookSurface(hooks, palette)
        self.view = TextSel(
            self.surface, config=config, palette=palette, diagnostics=diagnostics
        )
        self.dispatcher = KeyDispatcher(self.view, resolver)

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> DispatchResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.dispatcher.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        if result.consumed:
            self.hooks.update_status(result.status)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            action=result.action_id,
        )
        return result

    def focus_changed(self) -> None:
        self._log_state("focus ->", focused=self.surface.has_focus())
        self.view.refresh()

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        view = self.view
        return {
            "cursor": view.get_cursor_position(),
            "selecting": view.is_selecting,
            "selection": view.get_selection_range() if view.is_selecting else None,
        }


__all__ = ["HookSurface", "TextSelAdapter", "TextualUIHooks"]
