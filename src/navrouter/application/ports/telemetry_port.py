from __future__ import annotations

from typing import Protocol, runtime_checkable

from navrouter.domain.models import Project


@runtime_checkable
class TelemetryPort(Protocol):
    """Analytics collaborator."""

    def record_viewed_updates_list(self, project: Project) -> None:
        """Record that the updates list of `project` was viewed."""
