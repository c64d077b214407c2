"""Ports for fetching source datasets."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from airac_updater.domain.model import FacilityRecord


@dataclass(frozen=True, slots=True)
class DatasetRequest:
    """A named dataset and where to get it: a URL or a local file."""

    name: str
    location: str | Path


@runtime_checkable
class DatasetFetcher(Protocol):
    """Callable port returning the raw bytes of one dataset."""

    async def __call__(self, request: DatasetRequest) -> bytes: ...


type DatasetDecoder = Callable[[bytes], list[FacilityRecord]]


__all__ = ["DatasetDecoder", "DatasetFetcher", "DatasetRequest"]
