from .update_source_port import UpdateSourcePort
from .telemetry_port import TelemetryPort
from .event_log_port import EventLogPort

__all__ = ["UpdateSourcePort", "TelemetryPort", "EventLogPort"]
