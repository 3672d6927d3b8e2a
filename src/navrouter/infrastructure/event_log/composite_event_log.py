from __future__ import annotations

import logging
from typing import List, Optional, Union

from navrouter.application.events import TelemetryEvent
from navrouter.application.ports.event_log_port import EventLogPort

logger = logging.getLogger(__name__)


class CompositeEventLog(EventLogPort):
    """Tee events to multiple backends; one failing backend does not stop the others."""

    def __init__(self, backends: List[Optional[EventLogPort]]):
        self._backends = [b for b in backends if b is not None]

    def append(self, event: Union[TelemetryEvent, dict]) -> None:
        for backend in self._backends:
            try:
                backend.append(event)
            except Exception as e:
                logger.warning(f"CompositeEventLog backend append failed: {e}")

    def close(self) -> None:
        for backend in self._backends:
            try:
                backend.close()
            except Exception as e:
                logger.warning(f"CompositeEventLog backend close failed: {e}")
