"""
Latest-wins job runner.

One runner per output channel. Submitting a job cancels the job still in
flight and bumps the channel token; a job only delivers its result while it
holds the current token, so a late result from an abandoned job is discarded
even if the job swallowed its cancellation.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LatestWins(Generic[T]):
    def __init__(self, name: str) -> None:
        self.name = name
        self._token = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def token(self) -> int:
        return self._token

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    def is_current(self, token: int) -> bool:
        return token == self._token

    def submit(
        self,
        job: Callable[[], Awaitable[Optional[T]]],
        deliver: Callable[[T], None],
    ) -> asyncio.Task:
        """Start `job`, abandoning the previous one. Must run inside an event loop."""
        loop = asyncio.get_running_loop()
        self._token += 1
        token = self._token
        previous = self._task
        if previous is not None and not previous.done():
            logger.debug(f"[{self.name}] abandoning in-flight job for token {token}")
            previous.cancel()
        self._task = loop.create_task(self._run(token, job, deliver), name=f"{self.name}-{token}")
        return self._task

    async def _run(
        self,
        token: int,
        job: Callable[[], Awaitable[Optional[T]]],
        deliver: Callable[[T], None],
    ) -> None:
        try:
            result = await job()
        except Exception:
            logger.exception(f"[{self.name}] job for token {token} failed")
            return
        if not self.is_current(token):
            logger.debug(f"[{self.name}] discarding stale result of token {token}")
            return
        if result is None:
            return
        deliver(result)

    async def join(self) -> None:
        """Wait for the current job (and any job that superseded it) to finish."""
        while self._task is not None and not self._task.done():
            task = self._task
            await asyncio.gather(task, return_exceptions=True)

    def cancel(self) -> None:
        self._token += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
