"""Backup-then-write of reconciled sector files.

The original file is renamed to a timestamped backup before the new content
is written to a freshly created file under the original name. There is no
rollback: a failure after the rename leaves the backup in place and the
original name missing or incomplete.
"""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Final

from airac_updater.common.errors import CreateError, PersistenceError, RenameError, WriteError
from airac_updater.common.progress import Message, send_or_log
from airac_updater.domain.model import SectorFile

from .sct import serialize_sector_file

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from airac_updater.common.progress import ProgressChannel

    from .files import EuroscopeFile

log = getLogger(__name__)

BACKUP_SUFFIX: Final[str] = ".bkp"
BACKUP_TIMESTAMP_FORMAT: Final[str] = "%Y%m%d_%H%M%S"


def backup_path(path: Path, timestamp: datetime) -> Path:
    """``<name>.bkp<YYYYMMDD_HHMMSS>`` next to ``path``."""

    return path.with_name(f"{path.name}{BACKUP_SUFFIX}{timestamp:{BACKUP_TIMESTAMP_FORMAT}}")


async def write_back(
    file: EuroscopeFile,
    *,
    channel: ProgressChannel,
    timestamp: datetime,
) -> bool:
    """Back up and rewrite ``file``; return ``False`` for read-only kinds."""

    sector = file.content
    if not isinstance(sector, SectorFile):
        log.debug("Not writing %s: intersection lists are not written back", file.path)
        return False

    backup = backup_path(file.path, timestamp)
    await send_or_log(channel, Message.info(f"Moving {file.path} to {backup}"))
    await asyncio.to_thread(_rename, file.path, backup)

    await send_or_log(channel, Message.info(f"Writing new {file.path}"))
    text = serialize_sector_file(sector)
    await asyncio.to_thread(_write_new, file.path, text, sector.encoding)
    await send_or_log(channel, Message.info(f"Finished writing {file.path}"))
    return True


async def write_all(
    files: Iterable[EuroscopeFile],
    *,
    channel: ProgressChannel,
    timestamp: datetime | None = None,
) -> list[PersistenceError]:
    """Write back every file, continuing past failures; return the failures."""

    run_timestamp = timestamp or datetime.now(UTC)
    errors: list[PersistenceError] = []
    for file in files:
        try:
            await write_back(file, channel=channel, timestamp=run_timestamp)
        except PersistenceError as exc:
            errors.append(exc)
            await send_or_log(channel, Message.error(str(exc)))
    return errors


def _rename(source: Path, target: Path) -> None:
    if target.exists():
        raise RenameError(source, target, "backup file already exists")
    try:
        source.rename(target)
    except OSError as exc:
        raise RenameError(source, target, exc) from exc


def _write_new(path: Path, text: str, encoding: str) -> None:
    try:
        handle = path.open("x", encoding=encoding, newline="")
    except OSError as exc:
        raise CreateError(path, exc) from exc
    try:
        with handle:
            handle.write(text)
    except (OSError, UnicodeEncodeError) as exc:
        raise WriteError(path, exc) from exc
