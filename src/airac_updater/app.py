"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from airac_updater.adapters.aixm import FileDatasetFetcher, parse_aixm
from airac_updater.adapters.dfs import DfsClient, HttpDatasetFetcher, build_dataset_requests
from airac_updater.adapters.euroscope import load_euroscope_files, write_all
from airac_updater.common.errors import CatalogError, ChannelClosedError, LocalFileError
from airac_updater.common.progress import (
    DEFAULT_CAPACITY,
    Level,
    Message,
    ProgressChannel,
    send_or_log,
)
from airac_updater.config.catalog import CatalogConfig
from airac_updater.config.logging import PROGRESS_LOGGER_NAME
from airac_updater.config.reconciliation import ReconciliationConfig
from airac_updater.domain.ingestion import ingest_all
from airac_updater.domain.model import IntersectionMap
from airac_updater.domain.ports import DatasetRequest
from airac_updater.domain.reconciliation import (
    ReconciliationResult,
    reconcile_intersections,
    reconcile_sector,
)
from airac_updater.domain.reconciliation.matching import log_report

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from airac_updater.adapters.euroscope import EuroscopeFile
    from airac_updater.adapters.http_resilience import ResilientClient
    from airac_updater.common.errors import PersistenceError
    from airac_updater.config.http_resilience import ResilienceConfig
    from airac_updater.domain.model import FacilityRecord
    from airac_updater.domain.ports import DatasetFetcher
    from airac_updater.domain.reconciliation import Reporter

type ClientFactory = Callable[[ResilienceConfig], ResilientClient]

log = getLogger(__name__)
progress_log = getLogger(PROGRESS_LOGGER_NAME)


@dataclass(slots=True)
class UpdateSummary:
    datasets: int = 0
    records: int = 0
    files_loaded: int = 0
    files_written: int = 0
    results: dict[Path, ReconciliationResult] = field(default_factory=dict)
    persistence_errors: list[PersistenceError] = field(default_factory=list)
    error_messages: int = 0

    @property
    def files_changed(self) -> int:
        return sum(1 for result in self.results.values() if result.changed)


def run_update(
    directory: Path,
    *,
    catalog_config: CatalogConfig | None = None,
    reconciliation_config: ReconciliationConfig | None = None,
    aixm_files: Sequence[Path] | None = None,
    client_factory: ClientFactory | None = None,
    timestamp: datetime | None = None,
    capacity: int = DEFAULT_CAPACITY,
) -> UpdateSummary:
    """Update the controller pack in ``directory``; progress goes to the log."""

    async def run() -> UpdateSummary:
        channel = ProgressChannel(capacity)
        consumer = asyncio.create_task(consume_progress(channel), name="progress-consumer")
        try:
            summary = await update_controller_pack(
                directory,
                channel=channel,
                catalog_config=catalog_config,
                reconciliation_config=reconciliation_config,
                aixm_files=aixm_files,
                client_factory=client_factory,
                timestamp=timestamp,
            )
        finally:
            await channel.finish()
            error_messages = await consumer
        summary.error_messages = error_messages
        return summary

    return asyncio.run(run())


async def consume_progress(channel: ProgressChannel) -> int:
    """Write every progress message to the progress logger; return the error count."""

    errors = 0
    async for message in channel:
        if message.level is Level.ERROR:
            errors += 1
        progress_log.log(message.level.logging_level, message.content)
    return errors


async def update_controller_pack(
    directory: Path,
    *,
    channel: ProgressChannel,
    catalog_config: CatalogConfig | None = None,
    reconciliation_config: ReconciliationConfig | None = None,
    aixm_files: Sequence[Path] | None = None,
    client_factory: ClientFactory | None = None,
    timestamp: datetime | None = None,
) -> UpdateSummary:
    """Ingest the source datasets and reconcile them into the files of ``directory``.

    Catalog failures and an unreadable directory abort the run; failing
    datasets and files are reported on ``channel`` and skipped.
    """

    effective_catalog = catalog_config or CatalogConfig()
    run_timestamp = timestamp or datetime.now(UTC)
    log.info("Starting update of %s", directory)

    if aixm_files:
        requests = [DatasetRequest(name=path.name, location=path) for path in aixm_files]
        records, files = await _ingest_and_load(
            requests, fetcher=FileDatasetFetcher(), directory=directory, channel=channel
        )
    else:
        async with DfsClient(config=effective_catalog, client_factory=client_factory) as client:
            try:
                catalog = await client.fetch_catalog()
                requests = build_dataset_requests(
                    catalog,
                    effective_catalog.datasets,
                    amendment_id=effective_catalog.amendment_id,
                    release_type=effective_catalog.release_type,
                    base_url=effective_catalog.base_url,
                )
            except CatalogError as exc:
                await send_or_log(channel, Message.error(str(exc)))
                raise
            records, files = await _ingest_and_load(
                requests, fetcher=HttpDatasetFetcher(client), directory=directory, channel=channel
            )

    summary = UpdateSummary(datasets=len(requests), records=len(records), files_loaded=len(files))
    summary.results = await reconcile_all(
        files,
        records,
        config=reconciliation_config or ReconciliationConfig(),
        channel=channel,
    )
    reconciled = [file for file in files if file.path in summary.results]
    summary.persistence_errors = await write_all(
        reconciled, channel=channel, timestamp=run_timestamp
    )
    written = sum(1 for file in reconciled if not isinstance(file.content, IntersectionMap))
    summary.files_written = written - len(summary.persistence_errors)

    log.info(
        "Finished update: records=%s, files=%s, changed=%s, written=%s",
        summary.records,
        summary.files_loaded,
        summary.files_changed,
        summary.files_written,
    )
    return summary


async def _ingest_and_load(
    requests: Sequence[DatasetRequest],
    *,
    fetcher: DatasetFetcher,
    directory: Path,
    channel: ProgressChannel,
) -> tuple[list[FacilityRecord], list[EuroscopeFile]]:
    records_outcome, files_outcome = await asyncio.gather(
        ingest_all(requests, fetcher=fetcher, decoder=parse_aixm, channel=channel),
        load_euroscope_files(directory, channel=channel),
        return_exceptions=True,
    )
    if isinstance(files_outcome, LocalFileError):
        await send_or_log(channel, Message.error(str(files_outcome)))
        raise files_outcome
    if isinstance(files_outcome, BaseException):
        raise files_outcome
    if isinstance(records_outcome, BaseException):
        raise records_outcome
    return records_outcome, files_outcome


async def reconcile_all(
    files: Sequence[EuroscopeFile],
    records: Sequence[FacilityRecord],
    *,
    config: ReconciliationConfig,
    channel: ProgressChannel,
) -> dict[Path, ReconciliationResult]:
    """Fold ``records`` into every file, each file in its own worker thread."""

    report = threaded_reporter(channel)
    outcomes = await asyncio.gather(
        *(
            asyncio.to_thread(reconcile_file, file, records, config=config, report=report)
            for file in files
        ),
        return_exceptions=True,
    )

    results: dict[Path, ReconciliationResult] = {}
    for file, outcome in zip(files, outcomes, strict=True):
        if isinstance(outcome, Exception):
            await send_or_log(
                channel, Message.error(f"Reconciliation failed ({file.path}): {outcome!r}")
            )
            continue
        if isinstance(outcome, BaseException):
            raise outcome
        results[file.path] = outcome
        await channel.send(
            Message.info(
                f"Reconciled {file.path}: updated {outcome.updated}, "
                f"inserted {outcome.inserted}, ignored {outcome.ignored}"
            )
        )
    return results


def reconcile_file(
    file: EuroscopeFile,
    records: Sequence[FacilityRecord],
    *,
    config: ReconciliationConfig,
    report: Reporter,
) -> ReconciliationResult:
    if isinstance(file.content, IntersectionMap):
        return reconcile_intersections(file.content, records, config=config, report=report)
    return reconcile_sector(file.content, records, config=config, report=report)


def threaded_reporter(channel: ProgressChannel) -> Reporter:
    """Reporter for worker threads; falls back to the local log when the channel is gone."""

    def report(message: Message) -> None:
        try:
            channel.send_blocking(message)
        except ChannelClosedError:
            log_report(message)

    return report
