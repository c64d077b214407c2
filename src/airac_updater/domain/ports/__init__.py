"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import DatasetDecoder, DatasetFetcher, DatasetRequest

__all__ = ["DatasetDecoder", "DatasetFetcher", "DatasetRequest"]
