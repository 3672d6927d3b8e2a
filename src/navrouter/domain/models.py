"""
Project / update data models and the intercepted navigation request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, NamedTuple, Optional, Tuple
from urllib.parse import urlsplit


def _web_urls(data: Dict[str, Any]) -> Dict[str, Any]:
    urls = data.get("urls") or {}
    return urls.get("web") or {}


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


@dataclass(frozen=True)
class Project:
    """The project whose updates list the embedded view shows."""

    id: str
    updates_url: str  # navigation target of the embedded view
    name: str = ""
    slug: str = ""
    web_url: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Project id cannot be empty")
        if not self.updates_url:
            raise ValueError("Project updates url cannot be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        web = _web_urls(data)
        return cls(
            id=str(data["id"]),
            updates_url=data.get("updates_url") or web.get("updates") or "",
            name=data.get("name", "") or "",
            slug=data.get("slug", "") or "",
            web_url=web.get("project"),
        )


@dataclass(frozen=True)
class Update:
    """A project update, fetched per navigation and never cached."""

    id: str
    project_id: Optional[str] = None
    sequence: Optional[int] = None
    title: str = ""
    body: Optional[str] = None
    comments_count: int = 0
    likes_count: int = 0
    published_at: Optional[datetime] = None
    web_url: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Update id cannot be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Update":
        """Build from an API payload; raises KeyError/ValueError/TypeError when malformed."""
        project_id = data.get("project_id")
        sequence = data.get("sequence")
        return cls(
            id=str(data["id"]),
            project_id=str(project_id) if project_id is not None else None,
            sequence=int(sequence) if sequence is not None else None,
            title=data.get("title") or "",
            body=data.get("body"),
            comments_count=int(data.get("comments_count") or 0),
            likes_count=int(data.get("likes_count") or 0),
            published_at=_parse_timestamp(data.get("published_at")),
            web_url=_web_urls(data).get("update"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "project_id": self.project_id,
            "sequence": self.sequence,
            "title": self.title,
            "body": self.body,
            "comments_count": self.comments_count,
            "likes_count": self.likes_count,
            "published_at": self.published_at.isoformat() if self.published_at else None,
            "urls": {"web": {"update": self.web_url}},
        }


@dataclass(frozen=True)
class NavigationRequest:
    """
    An intercepted navigation attempt.

    `path_segments` is the encoded path split on "/", so an absolute path keeps
    its leading empty segment: "/projects/42/updates/7" gives
    ("", "projects", "42", "updates", "7").
    """

    url: str
    path_segments: Tuple[str, ...] = field(default=())

    def __post_init__(self):
        segments = self.path_segments or urlsplit(self.url).path.split("/")
        object.__setattr__(self, "path_segments", tuple(segments))

    @classmethod
    def from_url(cls, url: str) -> "NavigationRequest":
        return cls(url=url)


class UpdateParams(NamedTuple):
    project_param: str
    update_param: str


class ProjectAndUpdate(NamedTuple):
    project: Project
    update: Update
