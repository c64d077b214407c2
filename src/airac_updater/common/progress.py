"""Progress channel shared by every task of an update run.

The channel is a bounded multi-producer/single-consumer queue of
:class:`Message` values. Coroutines use :meth:`ProgressChannel.send`, which
waits for free capacity. Synchronous code has two options: :meth:`try_send`
never blocks and drops (with a local log record) when the message cannot be
queued, while :meth:`send_blocking` is meant for worker threads and waits
until the event loop has accepted the message.

The consumer drains the channel at its own pace (``async for message in
channel``). Calling :meth:`close` from the consumer side makes every later
send fail with :class:`ChannelClosedError`; :meth:`finish` is called by the
coordinator once all producers are done and ends the consumer's iteration.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from logging import getLogger
from typing import Final

from .errors import ChannelClosedError

log = getLogger(__name__)

DEFAULT_CAPACITY: Final[int] = 32
TRACE: Final[int] = 5


class Level(StrEnum):
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def logging_level(self) -> int:
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS: Final[dict[Level, int]] = {
    Level.TRACE: TRACE,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class Message:
    content: str
    level: Level
    time: datetime = field(default_factory=_utcnow)

    @classmethod
    def trace(cls, content: str) -> Message:
        return cls(content, Level.TRACE)

    @classmethod
    def debug(cls, content: str) -> Message:
        return cls(content, Level.DEBUG)

    @classmethod
    def info(cls, content: str) -> Message:
        return cls(content, Level.INFO)

    @classmethod
    def warn(cls, content: str) -> Message:
        return cls(content, Level.WARN)

    @classmethod
    def error(cls, content: str) -> Message:
        return cls(content, Level.ERROR)

    def render(self) -> str:
        stamp = self.time.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return f"[{stamp}] {self.content}"


class _EndOfStream:
    pass


_END: Final = _EndOfStream()


class ProgressChannel:
    """Bounded MPSC stream of progress messages."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("Progress channel capacity must be positive")
        self._queue: asyncio.Queue[Message | _EndOfStream] = asyncio.Queue(maxsize=capacity)
        self._loop: asyncio.AbstractEventLoop | None = None
        self._receiver_closed = False
        self._finished = False

    @property
    def closed(self) -> bool:
        """``True`` once the consumer has dropped the channel."""

        return self._receiver_closed

    # producers -------------------------------------------------------------

    async def send(self, message: Message) -> None:
        """Queue ``message``, waiting while the channel is full."""

        self._bind()
        self._ensure_open()
        await self._queue.put(message)

    def try_send(self, message: Message) -> bool:
        """Queue ``message`` without blocking; drop it and log locally on failure."""

        if self._receiver_closed or self._finished:
            log.error("Dropping progress message, channel closed: %s", message.content)
            return False

        running = _running_loop()
        if running is not None and (self._loop is None or running is self._loop):
            self._loop = running
            return self._offer(message)

        loop = self._loop
        if loop is None or loop.is_closed():
            log.error("Dropping progress message, no event loop: %s", message.content)
            return False
        try:
            loop.call_soon_threadsafe(self._offer, message)
        except RuntimeError:
            log.exception("Dropping progress message: %s", message.content)
            return False
        return True

    def send_blocking(self, message: Message) -> None:
        """Queue ``message`` from a worker thread, waiting for free capacity.

        Must not be called from the event loop thread itself.
        """

        loop = self._loop
        if loop is None or loop.is_closed():
            raise ChannelClosedError("Progress channel is not attached to a running event loop")
        if _running_loop() is loop:
            raise RuntimeError("send_blocking() called from the event loop thread")
        try:
            future = asyncio.run_coroutine_threadsafe(self.send(message), loop)
        except RuntimeError as exc:
            raise ChannelClosedError(f"Progress channel loop is gone: {exc}") from exc
        future.result()

    async def finish(self) -> None:
        """Signal the consumer that no further messages will be sent."""

        self._bind()
        if self._finished or self._receiver_closed:
            return
        self._finished = True
        await self._queue.put(_END)

    # consumer --------------------------------------------------------------

    async def receive(self) -> Message | None:
        """Return the next message, or ``None`` once the stream has ended."""

        self._bind()
        if self._receiver_closed:
            return None
        item = await self._queue.get()
        if isinstance(item, _EndOfStream):
            return None
        return item

    def drain_nowait(self) -> list[Message]:
        """Return every queued message without waiting."""

        messages: list[Message] = []
        while True:
            try:
                item = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                return messages
            if not isinstance(item, _EndOfStream):
                messages.append(item)

    def close(self) -> None:
        """Drop the consumer side; pending and future messages are discarded."""

        self._receiver_closed = True
        self.drain_nowait()

    def __aiter__(self) -> ProgressChannel:
        return self

    async def __anext__(self) -> Message:
        message = await self.receive()
        if message is None:
            raise StopAsyncIteration
        return message

    # internals -------------------------------------------------------------

    def _bind(self) -> None:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()

    def _ensure_open(self) -> None:
        if self._receiver_closed:
            raise ChannelClosedError("Progress channel receiver has been dropped")
        if self._finished:
            raise ChannelClosedError("Progress channel has already been finished")

    def _offer(self, message: Message) -> bool:
        if self._receiver_closed:
            log.error("Dropping progress message, channel closed: %s", message.content)
            return False
        try:
            self._queue.put_nowait(message)
        except asyncio.QueueFull:
            log.error("Dropping progress message, channel full: %s", message.content)
            return False
        return True


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


async def send_or_log(channel: ProgressChannel, message: Message) -> None:
    """Send ``message``; when the consumer is gone, write it to the local log instead."""

    try:
        await channel.send(message)
    except ChannelClosedError:
        log.log(message.level.logging_level, message.content)
