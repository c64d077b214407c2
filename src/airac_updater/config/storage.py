"""On-disk locations used between runs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "airac-updater"
HTTP_CACHE_FILENAME: Final[str] = "http_cache.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """The updater only persists its HTTP cache; controller packs are never copied here."""

    data_dir: Path

    def http_cache_path(self, *, create: bool = True) -> Path:
        directory = self.data_dir.expanduser().resolve()
        if create:
            directory.mkdir(parents=True, exist_ok=True)
        return directory / HTTP_CACHE_FILENAME


def default_data_dir() -> Path:
    """Per-user cache directory: ``%LOCALAPPDATA%`` on Windows, XDG cache home elsewhere."""

    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        root = Path(base) if base else Path.home() / "AppData" / "Local"
    else:
        base = os.getenv("XDG_CACHE_HOME")
        root = Path(base) if base else Path.home() / ".cache"
    return root / APP_DIR_NAME


def get_storage_config() -> StorageConfig:
    configured = os.getenv("AIRAC_UPDATER_DATA_DIR")
    return StorageConfig(data_dir=Path(configured) if configured else default_data_dir())
