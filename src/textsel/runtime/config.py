"""Runtime settings for the widget, with ``TEXTSEL_*`` environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from textsel.render.compositor import CURSOR_END_RESTORE_CHOICES, CursorEndRestore

ENV_PREFIX = "TEXTSEL_"


class ConfigError(ValueError):
    """Raised for configuration values the widget cannot use."""

    def __init__(self, key: str, value: object, message: str) -> None:
        super().__init__(f"{key}={value!r}: {message}")
        self.key = key
        self.value = value


@dataclass(frozen=True)
class TextSelConfig:
    primary_text: str = "white"
    background: str = "black"
    secondary_text: str = "yellow"
    cursor_end_restore: CursorEndRestore = "document"
    # Paint the cursor even when the host surface reports no focus.
    show_cursor_unfocused: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TextSelConfig":
        env = os.environ if environ is None else environ
        defaults = cls()

        def read(name: str, fallback: str) -> str:
            value = env.get(f"{ENV_PREFIX}{name}")
            return value.strip() if value and value.strip() else fallback

        show_raw = env.get(f"{ENV_PREFIX}SHOW_CURSOR_UNFOCUSED")
        show_cursor = defaults.show_cursor_unfocused
        if show_raw is not None:
            show_cursor = show_raw.strip().lower() in {"1", "true", "yes", "on"}

        config = cls(
            primary_text=read("PRIMARY_TEXT", defaults.primary_text),
            background=read("BACKGROUND", defaults.background),
            secondary_text=read("SECONDARY_TEXT", defaults.secondary_text),
            cursor_end_restore=read(  # type: ignore[arg-type]
                "CURSOR_END_RESTORE", defaults.cursor_end_restore
            ).lower(),
            show_cursor_unfocused=show_cursor,
        )
        return config.validate()

    def with_overrides(self, **changes: object) -> "TextSelConfig":
        return replace(self, **changes).validate()  # type: ignore[arg-type]

    def validate(self) -> "TextSelConfig":
        if self.cursor_end_restore not in CURSOR_END_RESTORE_CHOICES:
            raise ConfigError(
                "cursor_end_restore",
                self.cursor_end_restore,
                f"expected one of {', '.join(CURSOR_END_RESTORE_CHOICES)}",
            )
        for key in ("primary_text", "background", "secondary_text"):
            value = getattr(self, key)
            if not value.isalnum():
                raise ConfigError(key, value, "colour names are letters and digits")
        return self


__all__ = ["ConfigError", "TextSelConfig"]
