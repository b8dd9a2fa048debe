"""Route key input through the resolver into widget commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional

from textsel.runtime import telemetry

from .defaults import load_default_keymaps
from .models import KeyInput
from .registry import KeymapRegistry
from .resolver import KeymapResolver

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textsel.widget import TextSel


@dataclass(slots=True)
class DispatchResult:
    consumed: bool
    status: str = "ok"
    action_id: Optional[str] = None


class KeyDispatcher:
    """Binds one :class:`TextSel` to a resolver.

    The ``selecting`` flag is derived from the widget on every key, so
    bindings gated on it track the live selection state.
    """

    def __init__(
        self,
        view: "TextSel",
        resolver: Optional[KeymapResolver] = None,
        *,
        logger_name: Optional[str] = None,
    ) -> None:
        if resolver is None:
            resolver = KeymapResolver(load_default_keymaps(KeymapRegistry()))
        self.view = view
        self.resolver = resolver
        self._logger_name = logger_name
        stats = resolver.registry.stats()
        telemetry.record_event(
            "textsel.keymap",
            level="debug",
            data={
                "actions": stats.action_count,
                "bindings": stats.binding_count,
                "tokens": len(stats.tokens),
            },
            logger_name=logger_name,
        )

    def flags(self) -> Dict[str, bool]:
        return {"selecting": self.view.is_selecting}

    def handle_key(self, key: KeyInput) -> DispatchResult:
        token = key.token
        result = self.resolver.resolve(token, context=self.flags())
        if result.status != "match" or result.match is None:
            return DispatchResult(consumed=False, status="unbound")

        action = result.match.action
        status = action(self.view, result.match)
        telemetry.record_event(
            "textsel.key",
            level="debug",
            data={"token": token, "action": action.id, "status": status},
            logger_name=self._logger_name,
        )
        return DispatchResult(
            consumed=True,
            status=str(status) if status is not None else "ok",
            action_id=action.id,
        )


__all__ = ["DispatchResult", "KeyDispatcher"]
