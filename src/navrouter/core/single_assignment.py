"""
Write-once cell: the first assignment wins and is readable forever after.
"""

from __future__ import annotations

import asyncio
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class WriteOnce(Generic[T]):
    def __init__(self) -> None:
        self._value: Optional[T] = None
        self._is_set = False
        self._event: Optional[asyncio.Event] = None

    @property
    def is_set(self) -> bool:
        return self._is_set

    def set(self, value: T) -> bool:
        """Store `value` if empty. Returns False when a value was already stored."""
        if self._is_set:
            return False
        self._value = value
        self._is_set = True
        if self._event is not None:
            self._event.set()
        return True

    def get(self) -> Optional[T]:
        return self._value

    async def wait(self) -> T:
        """Block until a value is stored, then return it."""
        if not self._is_set:
            if self._event is None:
                self._event = asyncio.Event()
            await self._event.wait()
        return self._value  # type: ignore[return-value]
