from __future__ import annotations

from .errors import (
    AiracUpdaterError,
    CatalogDecodeError,
    CatalogError,
    CatalogFetchError,
    ChannelClosedError,
    DatasetDecodeError,
    DatasetError,
    DatasetFetchError,
    DatasetNotFoundError,
    LocalFileError,
    PersistenceError,
)
from .progress import Level, Message, ProgressChannel, send_or_log

__all__ = [
    "AiracUpdaterError",
    "CatalogDecodeError",
    "CatalogError",
    "CatalogFetchError",
    "ChannelClosedError",
    "DatasetDecodeError",
    "DatasetError",
    "DatasetFetchError",
    "DatasetNotFoundError",
    "Level",
    "LocalFileError",
    "Message",
    "PersistenceError",
    "ProgressChannel",
    "send_or_log",
]
