from __future__ import annotations

import json
import logging
from typing import Optional, Union

from navrouter.application.events import TelemetryEvent
from navrouter.application.ports.event_log_port import EventLogPort


class LoggingEventLog(EventLogPort):
    """Emit events as JSON lines to the Python logger."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self._logger = logger or logging.getLogger("navrouter.eventlog")
        self._level = level

    def append(self, event: Union[TelemetryEvent, dict]) -> None:
        if isinstance(event, TelemetryEvent):
            payload = event.to_json()
        else:
            payload = json.dumps(event, ensure_ascii=False, sort_keys=True, default=str)
        self._logger.log(self._level, payload)

    def close(self) -> None:
        return None
