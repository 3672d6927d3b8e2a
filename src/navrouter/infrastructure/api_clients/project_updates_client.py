"""
Project updates API client.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

from navrouter.core.errors import APIError
from navrouter.domain.models import Update

from .base import APIClient

logger = logging.getLogger(__name__)


class ProjectUpdatesClient(APIClient):
    """Update source backed by the public projects API."""

    DEFAULT_BASE_URL = "https://api.kickstarter.com"

    def __init__(
        self,
        base_url: Optional[str] = None,
        client_id: Optional[str] = None,
        timeout: int = 30,
    ):
        super().__init__(
            base_url=base_url or self.DEFAULT_BASE_URL,
            client_id=client_id,
            timeout=timeout,
        )

    async def fetch_update(self, project_param: str, update_param: str) -> Update:
        """
        Fetch one update.

        Args:
            project_param: project id or slug, as found in the page URL (encoded)
            update_param: update id, as found in the page URL (encoded)

        Returns:
            The parsed update

        Raises:
            ResourceNotFoundError / APIError
        """
        # Params are already percent-encoded; keep existing escapes intact.
        endpoint = (
            f"v1/projects/{quote(project_param, safe='%')}"
            f"/updates/{quote(update_param, safe='%')}"
        )
        data = await self.get(endpoint)
        try:
            if not isinstance(data, dict):
                raise TypeError(f"expected a JSON object, got {type(data).__name__}")
            return Update.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Malformed update payload for {project_param}/{update_param}: {e!r}")
            raise APIError(
                message=f"malformed update payload: {e!r}",
                context={"project_param": project_param, "update_param": update_param},
            )
