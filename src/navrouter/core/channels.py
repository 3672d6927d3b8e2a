"""
Typed output channels for the coordinator.

Each channel is a small publish/subscribe helper: every `listen()` call gets
its own asyncio queue and `publish()` fans the value out to all live
subscriptions. `LatestValueChannel` additionally replays the most recent value
to subscriptions created after it was published.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Generic, List, Optional, Set, TypeVar

from navrouter.core.errors import ChannelClosedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CLOSED: Any = object()


class Subscription(Generic[T]):
    """Consumer-facing handle of a channel."""

    def __init__(self, channel: "EventChannel[T]", maxsize: int = 0) -> None:
        self._channel = channel
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._closed = False

    @property
    def channel_name(self) -> str:
        return self._channel.name

    @property
    def closed(self) -> bool:
        return self._closed

    def _offer(self, item: Any) -> bool:
        try:
            self._queue.put_nowait(item)
            return True
        except asyncio.QueueFull:
            return False

    def _finish(self) -> None:
        if self._closed:
            return
        self._closed = True
        # Sentinel must get through even when the queue is full.
        if self._queue.full():
            self._queue.get_nowait()
        self._queue.put_nowait(_CLOSED)

    async def get(self) -> T:
        item = await self._queue.get()
        if item is _CLOSED:
            self._queue.put_nowait(_CLOSED)
            raise ChannelClosedError(message=f"channel '{self.channel_name}' is closed")
        return item

    def get_nowait(self) -> T:
        """Return a pending value; raises `asyncio.QueueEmpty` when there is none."""
        item = self._queue.get_nowait()
        if item is _CLOSED:
            self._queue.put_nowait(_CLOSED)
            raise ChannelClosedError(message=f"channel '{self.channel_name}' is closed")
        return item

    def drain(self) -> List[T]:
        """Pop every value already delivered, without waiting."""
        items: List[T] = []
        while True:
            try:
                item = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                return items
            if item is _CLOSED:
                self._queue.put_nowait(_CLOSED)
                return items
            items.append(item)

    def close(self) -> None:
        """Stop receiving values from the channel."""
        self._channel.remove(self)
        self._finish()

    def __aiter__(self) -> "Subscription[T]":
        return self

    async def __anext__(self) -> T:
        try:
            return await self.get()
        except ChannelClosedError:
            raise StopAsyncIteration


class EventChannel(Generic[T]):
    """Producer-facing handle: values go to subscriptions live at publish time."""

    def __init__(self, name: str, maxsize: int = 0) -> None:
        self.name = name
        self._maxsize = maxsize
        self._subscriptions: Set[Subscription[T]] = set()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def listen(self) -> Subscription[T]:
        subscription: Subscription[T] = Subscription(self, maxsize=self._maxsize)
        if self._closed:
            subscription._finish()
            return subscription
        self._subscriptions.add(subscription)
        return subscription

    def remove(self, subscription: Subscription[T]) -> None:
        self._subscriptions.discard(subscription)

    def publish(self, value: T) -> None:
        if self._closed:
            logger.debug(f"Dropping value published on closed channel '{self.name}'")
            return
        for subscription in list(self._subscriptions):
            if not subscription._offer(value):
                # Drop for a listener that fell behind; publishers never block.
                logger.warning(f"Subscriber of '{self.name}' is full, value dropped")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        subscriptions, self._subscriptions = self._subscriptions, set()
        for subscription in subscriptions:
            subscription._finish()


class LatestValueChannel(EventChannel[T]):
    """Channel that retains its last value and replays it to new subscribers."""

    def __init__(self, name: str, maxsize: int = 0) -> None:
        super().__init__(name, maxsize=maxsize)
        self._value: Optional[T] = None
        self._has_value = False

    @property
    def has_value(self) -> bool:
        return self._has_value

    @property
    def value(self) -> Optional[T]:
        return self._value

    def publish(self, value: T) -> None:
        if self._closed:
            logger.debug(f"Dropping value published on closed channel '{self.name}'")
            return
        self._value = value
        self._has_value = True
        super().publish(value)

    def listen(self) -> Subscription[T]:
        subscription = super().listen()
        if self._has_value and not self._closed:
            subscription._offer(self._value)
        return subscription
