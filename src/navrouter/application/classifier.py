"""
Request classification: URL shape routing and identifier extraction.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, Optional, Union
from urllib.parse import urlsplit

from navrouter.core.errors import MalformedRequestError
from navrouter.domain.models import NavigationRequest, UpdateParams

PROJECT_SEGMENT = 2
UPDATE_SEGMENT = 4


class RouteKind(Enum):
    COMMENTS = "comments"
    UPDATE = "update"
    PASS_THROUGH = "pass_through"


def classify_request(request: NavigationRequest) -> UpdateParams:
    """
    Extract the project and update params of a comments or update request.

    Args:
        request: intercepted request, e.g. path "/projects/42/updates/7/comments"

    Returns:
        ("42", "7"), taken verbatim (still percent-encoded) from segments 2 and 4

    Raises:
        MalformedRequestError: the path has fewer than 5 segments
    """
    segments = request.path_segments
    if len(segments) <= UPDATE_SEGMENT:
        raise MalformedRequestError(
            message=f"expected at least {UPDATE_SEGMENT + 1} path segments, got {len(segments)}",
            context={"url": request.url},
        )
    return UpdateParams(segments[PROJECT_SEGMENT], segments[UPDATE_SEGMENT])


class NavigationRouter:
    """Decides whether an intercepted URL is a comments page, an update page or neither."""

    COMMENTS_PATTERN = re.compile(r"^/projects/[^/]+/(?:updates|posts)/[^/]+/comments/?$")
    UPDATE_PATTERN = re.compile(r"^/projects/[^/]+/(?:updates|posts)/[^/]+/?$")

    def __init__(self, allowed_hosts: Optional[Iterable[str]] = None):
        # Empty means any host.
        self.allowed_hosts = {h.lower() for h in (allowed_hosts or [])}

    def _host_allowed(self, host: Optional[str]) -> bool:
        if not self.allowed_hosts:
            return True
        return (host or "").lower() in self.allowed_hosts

    def route(self, request: Union[str, NavigationRequest]) -> RouteKind:
        url = request.url if isinstance(request, NavigationRequest) else request
        parts = urlsplit(url)
        if not self._host_allowed(parts.hostname):
            return RouteKind.PASS_THROUGH
        if self.COMMENTS_PATTERN.match(parts.path):
            return RouteKind.COMMENTS
        if self.UPDATE_PATTERN.match(parts.path):
            return RouteKind.UPDATE
        return RouteKind.PASS_THROUGH
