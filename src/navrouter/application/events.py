from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

VIEWED_UPDATES = "Viewed Updates"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_session_id() -> str:
    return uuid.uuid4().hex


def new_event_id() -> str:
    # Shorter than session ids; unique enough within a session.
    return uuid.uuid4().hex[:16]


@dataclass
class TelemetryEvent:
    """Analytics event envelope, framework-agnostic."""

    name: str
    session_id: str
    event_id: str = field(default_factory=new_event_id)
    ts: datetime = field(default_factory=utcnow)
    properties: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "session_id": self.session_id,
            "event_id": self.event_id,
            "ts": self.ts.isoformat(),
            "properties": dict(self.properties),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, sort_keys=True)
