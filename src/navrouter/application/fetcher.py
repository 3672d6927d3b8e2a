"""
Fail-silent update fetching.
"""

from __future__ import annotations

import inspect
import logging
from typing import Optional

from navrouter.application.ports.update_source_port import UpdateSourcePort
from navrouter.core.errors import APIError, NavRouterError, Result
from navrouter.domain.models import Update, UpdateParams

logger = logging.getLogger(__name__)


class UpdateFetcher:
    """
    Wraps the update source so that a failed fetch never reaches the caller.

    No timeout, retry or cache: every call is one independent request.
    """

    def __init__(self, source: UpdateSourcePort):
        self._source = source

    @property
    def source(self) -> UpdateSourcePort:
        return self._source

    async def fetch_result(self, params: UpdateParams) -> Result[Update, NavRouterError]:
        """One call to the source; every failure comes back as a NavRouterError."""
        project_param, update_param = params
        try:
            update = await self._source.fetch_update(project_param, update_param)
        except NavRouterError as e:
            return Result.err(e)
        except Exception as e:
            return Result.err(
                APIError(
                    message=str(e) or type(e).__name__,
                    context={"project_param": project_param, "update_param": update_param},
                )
            )
        return Result.ok(update)

    async def fetch(self, params: UpdateParams) -> Optional[Update]:
        """Resolve to the update, or None when the source failed."""
        result = await self.fetch_result(params)
        if not result.is_ok():
            logger.warning(f"Update fetch failed for {params.project_param}/{params.update_param}: {result.error}")
        return result.unwrap_or(None)

    async def close(self) -> None:
        close = getattr(self._source, "close", None)
        if close is None:
            return
        res = close()
        if inspect.isawaitable(res):
            await res
