"""HTTP client for the DFS dataset service."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from airac_updater.adapters.http_resilience import ResilientClient
from airac_updater.common.errors import (
    CatalogDecodeError,
    CatalogFetchError,
    DatasetFetchError,
)

from .schema import AmendmentCatalog

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from airac_updater.config.catalog import CatalogConfig
    from airac_updater.config.http_resilience import ResilienceConfig
    from airac_updater.domain.ports import DatasetRequest

log = getLogger(__name__)


class DfsClient:
    """Fetch the catalog and dataset files over one shared HTTP client.

    Use as an async context manager.
    """

    def __init__(
        self,
        *,
        config: CatalogConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or ResilientClient
        self._client: ResilientClient | None = None

    async def __aenter__(self) -> DfsClient:
        self._client = self._client_factory(self._config.resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_catalog(self) -> AmendmentCatalog:
        client = self._require_client()
        try:
            response = await client.get(self._config.catalog_url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise CatalogFetchError(f"Could not fetch DFS AIXM dataset list: {exc}") from exc

        log.debug("DFS catalog payload: %s", response.text)
        try:
            return AmendmentCatalog.model_validate_json(response.content)
        except ValidationError as exc:
            raise CatalogDecodeError(
                f"Could not deserialize DFS AIXM dataset list: {_first_error(exc)}"
            ) from exc

    async def fetch_dataset(self, request: DatasetRequest) -> bytes:
        client = self._require_client()
        try:
            response = await client.get(str(request.location))
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise DatasetFetchError(
                f"Could not fetch AIXM dataset ({request.name}): {exc}",
                dataset=request.name,
            ) from exc
        return response.content

    def _require_client(self) -> ResilientClient:
        if self._client is None:
            raise RuntimeError("DfsClient must be used as an async context manager")
        return self._client


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{first.get('msg', 'invalid payload')} at {location or '<root>'}"


class HttpDatasetFetcher:
    """Dataset fetcher sharing the HTTP client of an open :class:`DfsClient`."""

    def __init__(self, client: DfsClient) -> None:
        self._client = client

    async def __call__(self, request: DatasetRequest) -> bytes:
        return await self._client.fetch_dataset(request)
