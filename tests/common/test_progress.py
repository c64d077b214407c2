from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime

import pytest

from airac_updater.common.errors import ChannelClosedError
from airac_updater.common.progress import Level, Message, ProgressChannel, send_or_log


def test_messages_arrive_in_send_order() -> None:
    async def run() -> list[str]:
        channel = ProgressChannel(capacity=2)

        async def produce() -> None:
            for index in range(5):
                await channel.send(Message.info(f"step {index}"))
            await channel.finish()

        producer = asyncio.create_task(produce())
        received = [message.content async for message in channel]
        await producer
        return received

    assert asyncio.run(run()) == [f"step {index}" for index in range(5)]


def test_send_after_close_raises() -> None:
    async def run() -> None:
        channel = ProgressChannel()
        channel.close()
        assert channel.closed
        await channel.send(Message.info("late"))

    with pytest.raises(ChannelClosedError):
        asyncio.run(run())


def test_send_after_finish_raises() -> None:
    async def run() -> None:
        channel = ProgressChannel()
        await channel.finish()
        await channel.send(Message.info("late"))

    with pytest.raises(ChannelClosedError):
        asyncio.run(run())


def test_try_send_drops_when_full(caplog: pytest.LogCaptureFixture) -> None:
    async def run() -> tuple[bool, bool, list[Message]]:
        channel = ProgressChannel(capacity=1)
        first = channel.try_send(Message.info("kept"))
        second = channel.try_send(Message.info("dropped"))
        return first, second, channel.drain_nowait()

    with caplog.at_level(logging.ERROR, logger="airac_updater.common.progress"):
        first, second, queued = asyncio.run(run())

    assert (first, second) == (True, False)
    assert [message.content for message in queued] == ["kept"]
    assert "dropped" in caplog.text


def test_try_send_on_closed_channel_logs() -> None:
    channel = ProgressChannel()
    channel.close()

    assert channel.try_send(Message.warn("nobody listens")) is False


def test_send_blocking_from_worker_thread() -> None:
    async def run() -> list[str]:
        channel = ProgressChannel(capacity=1)
        received: list[str] = []

        async def consume() -> None:
            async for message in channel:
                received.append(message.content)

        consumer = asyncio.create_task(consume())
        await channel.send(Message.debug("from loop"))

        def work() -> None:
            for index in range(3):
                channel.send_blocking(Message.debug(f"from thread {index}"))

        await asyncio.to_thread(work)
        await channel.finish()
        await consumer
        return received

    assert asyncio.run(run()) == [
        "from loop",
        "from thread 0",
        "from thread 1",
        "from thread 2",
    ]


def test_send_or_log_falls_back_to_logging(caplog: pytest.LogCaptureFixture) -> None:
    async def run() -> None:
        channel = ProgressChannel()
        channel.close()
        await send_or_log(channel, Message.error("dataset failed"))

    with caplog.at_level(logging.ERROR):
        asyncio.run(run())

    assert [record.getMessage() for record in caplog.records] == ["dataset failed"]


def test_message_levels_and_render() -> None:
    message = Message("hello", Level.WARN, time=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC))

    assert message.level.logging_level == logging.WARNING
    assert message.render() == "[2024-01-02T03:04:05.000Z] hello"
    assert Message.trace("t").level is Level.TRACE


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ProgressChannel(capacity=0)
