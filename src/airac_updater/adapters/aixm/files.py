"""Dataset fetcher for AIXM files already on disk."""

from __future__ import annotations

import asyncio
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from airac_updater.common.errors import DatasetFetchError

if TYPE_CHECKING:
    from airac_updater.domain.ports import DatasetRequest

log = getLogger(__name__)


class FileDatasetFetcher:
    """Read a dataset from the local filesystem instead of the DFS service."""

    async def __call__(self, request: DatasetRequest) -> bytes:
        path = Path(request.location)
        log.debug("Reading AIXM dataset %s from %s", request.name, path)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise DatasetFetchError(
                f"Could not read AIXM dataset ({request.name}): {exc}",
                dataset=request.name,
            ) from exc
