from __future__ import annotations

from typing import List, Union

from navrouter.application.events import TelemetryEvent
from navrouter.application.ports.event_log_port import EventLogPort


class InMemoryEventLog(EventLogPort):
    """Simple in-memory event log (useful for tests/evals)."""

    def __init__(self) -> None:
        self.events: List[dict] = []

    def append(self, event: Union[TelemetryEvent, dict]) -> None:
        if isinstance(event, TelemetryEvent):
            self.events.append(event.to_dict())
        else:
            self.events.append(dict(event))

    def close(self) -> None:
        return None
