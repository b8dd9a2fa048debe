"""Pluggable sinks for widget debug output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple

from . import telemetry


class DiagnosticSink(Protocol):
    def __call__(self, event: str, data: Dict[str, Any]) -> None: ...


class NullSink:
    def __call__(self, event: str, data: Dict[str, Any]) -> None:
        del event, data


@dataclass
class TelemetrySink:
    """Forwards diagnostics to telemetry as debug events."""

    logger_name: Optional[str] = "textsel.diagnostics"
    level: str = "debug"

    def __call__(self, event: str, data: Dict[str, Any]) -> None:
        telemetry.record_event(
            event, level=self.level, data=data, logger_name=self.logger_name
        )


@dataclass
class MemorySink:
    records: List[Tuple[str, Dict[str, Any]]] = field(default_factory=list)

    def __call__(self, event: str, data: Dict[str, Any]) -> None:
        self.records.append((event, dict(data)))

    def events(self) -> List[str]:
        return [event for event, _ in self.records]


__all__ = ["DiagnosticSink", "MemorySink", "NullSink", "TelemetrySink"]
