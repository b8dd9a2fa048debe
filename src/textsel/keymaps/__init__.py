"""Declarative keymap registry, default bindings and key dispatch."""

from .models import ActionRef, Binding, KeyInput, KeyStroke, WhenClause
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import DEFAULT_BINDINGS, load_default_keymaps
from .dispatcher import DispatchResult, KeyDispatcher

__all__ = [
    "ActionRef",
    "Binding",
    "KeyInput",
    "KeyStroke",
    "WhenClause",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
    "DispatchResult",
    "KeyDispatcher",
]
