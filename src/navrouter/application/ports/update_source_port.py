from __future__ import annotations

from typing import Protocol, runtime_checkable

from navrouter.domain.models import Update


@runtime_checkable
class UpdateSourcePort(Protocol):
    """
    Resource-retrieval collaborator.

    `fetch_update` resolves to the update or raises (network error, not found,
    malformed payload). The HTTP shape is owned entirely by the implementation.
    """

    async def fetch_update(self, project_param: str, update_param: str) -> Update:
        """Fetch one update of a project."""
