"""
build_coordinator unit tests
"""

import logging

import pytest

from navrouter.application.telemetry import NullTelemetry
from navrouter.bootstrap import build_coordinator, build_event_log
from navrouter.config import AppConfig
from navrouter.infrastructure.api_clients import ProjectUpdatesClient
from navrouter.infrastructure.event_log import CompositeEventLog, InMemoryEventLog, LoggingEventLog
from tests.test_framework import FakeUpdateSource, make_project


class TestBuildEventLog:
    """build_event_log tests"""

    @pytest.mark.parametrize(
        "backend,expected",
        [("logging", LoggingEventLog), ("memory", InMemoryEventLog), ("none", type(None))],
    )
    def test_backend_selection(self, backend, expected):
        config = AppConfig.model_validate({"telemetry": {"backend": backend}})
        assert isinstance(build_event_log(config), expected)

    def test_several_backends_are_teed(self, caplog):
        caplog.set_level(logging.INFO, logger="navrouter.eventlog")
        config = AppConfig.model_validate({"telemetry": {"backend": ["logging", "memory"]}})

        event_log = build_event_log(config)
        coordinator = build_coordinator(config, source=FakeUpdateSource(), event_log=event_log)
        coordinator.startup(make_project("42"))

        assert isinstance(event_log, CompositeEventLog)
        assert [r.name for r in caplog.records].count("navrouter.eventlog") == 1

    def test_env_backend_list(self):
        config = AppConfig().with_env({"NAVROUTER_TELEMETRY_BACKEND": "memory,logging"})
        assert isinstance(build_event_log(config), CompositeEventLog)


class TestBuildCoordinator:
    """build_coordinator tests"""

    def test_default_source_uses_api_config(self):
        config = AppConfig.model_validate({"api": {"base_url": "http://api.test/", "client_id": "cid"}})
        coordinator = build_coordinator(config)

        source = coordinator.fetcher.source
        assert isinstance(source, ProjectUpdatesClient)
        assert source.base_url == "http://api.test"
        assert source.client_id == "cid"

    def test_router_uses_allowed_hosts(self):
        config = AppConfig.model_validate({"routing": {"allowed_hosts": ["www.example.com"]}})
        coordinator = build_coordinator(config, source=FakeUpdateSource())
        assert coordinator.router.allowed_hosts == {"www.example.com"}

    def test_telemetry_goes_to_event_log(self):
        event_log = InMemoryEventLog()
        coordinator = build_coordinator(source=FakeUpdateSource(), event_log=event_log)

        coordinator.startup(make_project("42"))

        assert [e["name"] for e in event_log.events] == ["Viewed Updates"]

    def test_no_telemetry_backend(self):
        config = AppConfig.model_validate({"telemetry": {"backend": "none"}})
        coordinator = build_coordinator(config, source=FakeUpdateSource())
        assert isinstance(coordinator.telemetry, NullTelemetry)
