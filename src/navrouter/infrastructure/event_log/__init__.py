"""
Event log backends for telemetry events.
"""

from .memory_event_log import InMemoryEventLog
from .logging_event_log import LoggingEventLog
from .composite_event_log import CompositeEventLog

__all__ = ["InMemoryEventLog", "LoggingEventLog", "CompositeEventLog"]
