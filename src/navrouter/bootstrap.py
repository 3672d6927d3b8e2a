"""
Wiring of a coordinator from configuration.
"""

from __future__ import annotations

from typing import List, Optional

from navrouter.application.classifier import NavigationRouter
from navrouter.application.coordinator import NavigationCoordinator
from navrouter.application.fetcher import UpdateFetcher
from navrouter.application.ports.event_log_port import EventLogPort
from navrouter.application.ports.update_source_port import UpdateSourcePort
from navrouter.application.telemetry import EventLogTelemetry, NullTelemetry
from navrouter.config.models import AppConfig
from navrouter.infrastructure.api_clients import ProjectUpdatesClient
from navrouter.infrastructure.event_log import CompositeEventLog, InMemoryEventLog, LoggingEventLog


_BACKENDS = {
    "logging": LoggingEventLog,
    "memory": InMemoryEventLog,
}


def build_event_log(config: AppConfig) -> Optional[EventLogPort]:
    """One backend per configured name; several are teed through a CompositeEventLog."""
    backends: List[EventLogPort] = [_BACKENDS[name]() for name in config.telemetry.backend]
    if not backends:
        return None
    if len(backends) == 1:
        return backends[0]
    return CompositeEventLog(backends)


def build_coordinator(
    config: Optional[AppConfig] = None,
    *,
    source: Optional[UpdateSourcePort] = None,
    event_log: Optional[EventLogPort] = None,
) -> NavigationCoordinator:
    """
    Build a coordinator for one web view session.

    Args:
        config: app config (defaults when omitted)
        source: update source; a ProjectUpdatesClient from `config.api` by default
        event_log: telemetry backend; picked from `config.telemetry` by default
    """
    config = config or AppConfig()
    if source is None:
        source = ProjectUpdatesClient(
            base_url=config.api.base_url,
            client_id=config.api.client_id,
            timeout=config.api.timeout,
        )
    if event_log is None:
        event_log = build_event_log(config)
    telemetry = EventLogTelemetry(event_log) if event_log is not None else NullTelemetry()
    return NavigationCoordinator(
        UpdateFetcher(source),
        telemetry,
        router=NavigationRouter(config.routing.allowed_hosts),
    )
