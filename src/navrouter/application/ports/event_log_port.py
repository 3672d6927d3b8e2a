from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

from navrouter.application.events import TelemetryEvent


@runtime_checkable
class EventLogPort(Protocol):
    """
    Minimal event log port.

    Implementations may log to stdout, keep events in memory or tee to several
    backends. Nothing is persisted across process restarts.
    """

    def append(self, event: Union[TelemetryEvent, dict]) -> None:
        """Append an event."""

    def close(self) -> None:
        """Close underlying resources (optional)."""
