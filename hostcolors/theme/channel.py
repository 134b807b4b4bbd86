"""Unbounded asyncio channel carrying theme change events."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

from hostcolors.core.models import ThemeChangeEvent
from hostcolors.exceptions import ChannelClosedError

_CLOSED = object()


class ThemeEventChannel:
    """Single-producer, single-consumer channel of ThemeChangeEvent.

    The consumer calls close() when it stops listening; the next send then
    raises ChannelClosedError so the producer can shut down. Events queued
    before close() are still delivered, after which receivers (including
    ones already waiting) see the channel as closed.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether the channel has been closed."""
        return self._closed

    def send(self, event: ThemeChangeEvent) -> None:
        """Queue an event without blocking.

        Parameters
        ----------
        event : ThemeChangeEvent
            Event to deliver

        Raises
        ------
        ChannelClosedError
            If the receiver has closed the channel
        """
        if self._closed:
            raise ChannelClosedError("theme event channel is closed")
        self._queue.put_nowait(event)

    async def recv(self) -> ThemeChangeEvent:
        """Wait for the next event.

        Raises
        ------
        ChannelClosedError
            If the channel is closed and every queued event has been received
        """
        item = await self._queue.get()
        if item is _CLOSED:
            self._queue.put_nowait(_CLOSED)
            raise ChannelClosedError("theme event channel is closed")
        return item

    def pending(self) -> int:
        """Number of events sent but not yet received."""
        size = self._queue.qsize()
        return size - 1 if self._closed else size

    def close(self) -> None:
        """Stop accepting events and wake any waiting receiver.

        Already queued events stay receivable.
        """
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_CLOSED)

    def __aiter__(self) -> AsyncIterator[ThemeChangeEvent]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[ThemeChangeEvent]:
        while True:
            try:
                event = await self.recv()
            except ChannelClosedError:
                return
            yield event
