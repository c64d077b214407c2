"""Public interface for the DFS dataset service adapter."""

from __future__ import annotations

from .catalog import build_dataset_requests, resolve_dataset_url
from .client import DfsClient, HttpDatasetFetcher
from .schema import AmendmentCatalog, CatalogGroup, CatalogLeaf, CatalogRelease

__all__ = [
    "AmendmentCatalog",
    "CatalogGroup",
    "CatalogLeaf",
    "CatalogRelease",
    "DfsClient",
    "HttpDatasetFetcher",
    "build_dataset_requests",
    "resolve_dataset_url",
]
