"""Concurrent ingestion of source datasets.

Each dataset is fetched and decoded in its own task. Tasks are joined with a
join-all that collects every outcome, so a failing dataset is reported and
dropped while its siblings still contribute their records.
"""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from airac_updater.common.errors import (
    AiracUpdaterError,
    ChannelClosedError,
    DatasetDecodeError,
)
from airac_updater.common.progress import Message, send_or_log

if TYPE_CHECKING:
    from collections.abc import Sequence

    from airac_updater.common.progress import ProgressChannel
    from airac_updater.domain.model import FacilityRecord
    from airac_updater.domain.ports import DatasetDecoder, DatasetFetcher, DatasetRequest

log = getLogger(__name__)


async def ingest_all(
    requests: Sequence[DatasetRequest],
    *,
    fetcher: DatasetFetcher,
    decoder: DatasetDecoder,
    channel: ProgressChannel,
) -> list[FacilityRecord]:
    """Fetch and decode ``requests`` concurrently; return all surviving records.

    Records of different datasets are concatenated in no guaranteed order.
    """

    tasks = [
        asyncio.create_task(
            ingest_dataset(request, fetcher=fetcher, decoder=decoder, channel=channel),
            name=f"ingest:{request.name}",
        )
        for request in requests
    ]
    outcomes = await asyncio.gather(*tasks, return_exceptions=True)

    records: list[FacilityRecord] = []
    failed = 0
    for request, outcome in zip(requests, outcomes, strict=True):
        if isinstance(outcome, Exception):
            failed += 1
            await send_or_log(channel, Message.error(_describe_failure(request.name, outcome)))
            continue
        if isinstance(outcome, BaseException):
            raise outcome
        records.extend(outcome)

    log.info(
        "Ingested %s records from %s of %s datasets",
        len(records),
        len(requests) - failed,
        len(requests),
    )
    return records


async def ingest_dataset(
    request: DatasetRequest,
    *,
    fetcher: DatasetFetcher,
    decoder: DatasetDecoder,
    channel: ProgressChannel,
) -> list[FacilityRecord]:
    await channel.send(Message.info(f"Fetching AIXM: {request.name}"))
    data = await fetcher(request)
    await channel.send(Message.info(f"Fetched AIXM: {request.name}"))

    await channel.send(Message.info(f"Loading AIXM: {request.name}"))
    try:
        records = await asyncio.to_thread(decoder, data)
    except ValueError as exc:
        raise DatasetDecodeError(
            f"Could not deserialize AIXM dataset ({request.name}): {exc}",
            dataset=request.name,
        ) from exc
    await channel.send(Message.info(f"Loaded AIXM: {request.name}"))
    log.debug("Decoded %s records from %s", len(records), request.name)
    return records


def _describe_failure(dataset: str, exc: Exception) -> str:
    if isinstance(exc, ChannelClosedError):
        return f"Progress reporting failed for AIXM dataset ({dataset}): {exc}"
    if isinstance(exc, AiracUpdaterError):
        return str(exc)
    return f"AIXM dataset task failed ({dataset}): {exc!r}"
