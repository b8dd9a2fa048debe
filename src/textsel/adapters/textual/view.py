"""Focusable Textual widget hosting a :class:`~textsel.widget.TextSel`."""

from __future__ import annotations

from typing import Optional, Tuple

try:  # pragma: no cover - import guard
    from textual import events
    from textual.message import Message
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textsel.adapters.textual"
    ) from exc

from rich.text import Text

from textsel.runtime.config import TextSelConfig

from .controller import TextSelAdapter, TextualUIHooks


class TextSelView(Static, can_focus=True):
    """Shows tagged text with a keyboard cursor and posts ``Selected``."""

    DEFAULT_CSS = """
    TextSelView {
        height: auto;
        padding: 0 1;
    }
    """

    class Selected(Message):
        """Posted when the user commits a selection."""

        def __init__(self, text: str) -> None:
            super().__init__()
            self.text = text

    class StatusChanged(Message):
        def __init__(self, status: str) -> None:
            super().__init__()
            self.status = status

    def __init__(
        self,
        text: str = "",
        *,
        config: Optional[TextSelConfig] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__("", id=id, classes=classes)
        self._initial_text = text
        self._config = config
        self.adapter: TextSelAdapter | None = None
        self.log_lines: list[str] = []

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_text=self._paint,
            has_focus=lambda: self.has_focus,
            update_status=self._status,
            log=self.log_lines.append,
        )
        self.adapter = TextSelAdapter(hooks, config=self._config)
        self.adapter.view.set_select_func(self._selected)
        self.adapter.view.set_text(self._initial_text)

    def set_text(self, text: str) -> None:
        if self.adapter is None:
            self._initial_text = text
            return
        self.adapter.view.set_text(text)

    def on_focus(self, event: events.Focus) -> None:
        del event
        self._schedule_refresh()

    def on_blur(self, event: events.Blur) -> None:
        del event
        self._schedule_refresh()

    def on_key(self, event: events.Key) -> None:
        if self.adapter is None:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        result = self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        if result.consumed:
            event.stop()
            event.prevent_default()

    def _schedule_refresh(self) -> None:
        # Focus state is read when the recomposition runs, not when scheduled.
        if self.adapter is not None:
            self.call_after_refresh(self.adapter.focus_changed)

    def _paint(self, text: Text) -> None:
        self.update(text)

    def _status(self, status: str) -> None:
        self.post_message(self.StatusChanged(status))

    def _selected(self, text: str) -> None:
        self.post_message(self.Selected(text))

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        modifiers = []
        ctrl = bool(getattr(event, "ctrl", False))
        alt = bool(getattr(event, "alt", False) or getattr(event, "meta", False))
        shift = bool(getattr(event, "shift", False))
        if ctrl:
            modifiers.append("CTRL")
        if alt:
            modifiers.append("ALT")
        if shift and not (event.character and len(event.character) == 1):
            modifiers.append("SHIFT")
        key = event.key
        if key in {"ctrl+c", "ctrl+q"}:
            return None
        if key == "escape":
            return ("ESC", None, tuple(modifiers))
        if key in {"enter", "return"}:
            return ("ENTER", None, tuple(modifiers))
        if key == "space":
            return ("SPACE", " ", tuple(modifiers))
        if event.character and event.is_printable:
            return (event.character, event.character, tuple(modifiers))
        return (key.upper(), None, tuple(modifiers))


__all__ = ["TextSelView"]
