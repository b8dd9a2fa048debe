"""Resolve key tokens to actions, honoring ``when`` flags and priority."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Mapping, Optional

from textsel.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Looks up the winning binding for a token.

    The token index is rebuilt whenever the registry revision changes.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._revision = -1
        self._index: Dict[str, tuple[Binding, ...]] = {}

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(
        self, token: str, *, context: Optional[Mapping[str, bool]] = None
    ) -> ResolutionResult:
        ctx = context or {}
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"token": token},
        ) as handle:
            candidates = [
                binding for binding in self._bindings_for(token) if binding.allows(ctx)
            ]
            if not candidates:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")

            candidates.sort(key=lambda b: (-b.priority, b.id))
            binding = candidates[0]
            action = self._registry.get_action(binding.action_id)
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", binding.id)
            return ResolutionResult(
                status="match", match=ResolutionMatch(binding=binding, action=action)
            )

    def _bindings_for(self, token: str) -> tuple[Binding, ...]:
        revision = self._registry.revision()
        if revision != self._revision:
            index: Dict[str, list[Binding]] = {}
            for binding in self._registry.iter_bindings():
                index.setdefault(binding.token, []).append(binding)
            self._index = {key: tuple(value) for key, value in index.items()}
            self._revision = revision
        return self._index.get(token, ())


__all__ = ["KeymapResolver", "ResolutionMatch", "ResolutionResult"]
