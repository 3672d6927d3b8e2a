from __future__ import annotations

from typing import List, Optional

from navrouter.application.events import VIEWED_UPDATES, TelemetryEvent, new_session_id
from navrouter.application.ports.event_log_port import EventLogPort
from navrouter.domain.models import Project


class EventLogTelemetry:
    """Telemetry collaborator that appends analytics events to an event log."""

    def __init__(self, event_log: EventLogPort, session_id: Optional[str] = None):
        self._event_log = event_log
        self.session_id = session_id or new_session_id()

    def record_viewed_updates_list(self, project: Project) -> None:
        event = TelemetryEvent(
            name=VIEWED_UPDATES,
            session_id=self.session_id,
            properties={"project_id": project.id, "project_slug": project.slug},
        )
        self._event_log.append(event)


class NullTelemetry:
    """Drops every event."""

    def record_viewed_updates_list(self, project: Project) -> None:
        return None


class RecordingTelemetry:
    """Keeps the projects it was told about; handy for tests and evals."""

    def __init__(self) -> None:
        self.viewed: List[Project] = []

    def record_viewed_updates_list(self, project: Project) -> None:
        self.viewed.append(project)
