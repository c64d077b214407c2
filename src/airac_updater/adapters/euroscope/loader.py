"""Concurrent loading of the EuroScope files found in one directory."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from airac_updater.common.errors import (
    LocalFileError,
    LocalFormatError,
    OpenError,
    ParseError,
    ReadError,
)
from airac_updater.common.progress import Message, send_or_log
from airac_updater.domain.model import SectorFile

from .files import EuroscopeFile, FileKind, classify
from .isec import read_intersections
from .sct import read_sector_file

if TYPE_CHECKING:
    from pathlib import Path

    from airac_updater.common.progress import ProgressChannel

log = getLogger(__name__)


async def load_euroscope_files(
    directory: Path,
    *,
    channel: ProgressChannel,
) -> list[EuroscopeFile]:
    """Load every ``.sct`` file and the ``isec.txt`` list of ``directory``.

    A file that cannot be opened, read or parsed is reported and left out.
    An unreadable directory raises :class:`LocalFileError`.
    """

    try:
        paths = await asyncio.to_thread(_list_files, directory)
    except OSError as exc:
        raise LocalFileError(
            f"Could not read directory ({directory}): {exc}",
            path=directory,
            file_format="directory",
        ) from exc

    candidates = [(path, kind) for path in paths if (kind := classify(path)) is not None]
    tasks = [
        asyncio.create_task(load_file(path, kind, channel=channel), name=f"load:{path.name}")
        for path, kind in candidates
    ]
    outcomes = await asyncio.gather(*tasks, return_exceptions=True)

    files: list[EuroscopeFile] = []
    for (path, kind), outcome in zip(candidates, outcomes, strict=True):
        if isinstance(outcome, LocalFileError):
            await send_or_log(channel, Message.error(str(outcome)))
        elif isinstance(outcome, Exception):
            await send_or_log(
                channel,
                Message.error(f"Loading {kind.label} file failed ({path}): {outcome!r}"),
            )
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            files.append(outcome)

    log.info("Loaded %s of %s EuroScope files from %s", len(files), len(candidates), directory)
    return files


async def load_file(path: Path, kind: FileKind, *, channel: ProgressChannel) -> EuroscopeFile:
    label = kind.label
    await channel.send(Message.info(f"Reading {label}: {path}"))
    data = await asyncio.to_thread(read_bytes, path, kind)

    await channel.send(Message.info(f"Parsing {label}: {path}"))
    reader = read_sector_file if kind is FileKind.SCT else read_intersections
    try:
        content = await asyncio.to_thread(reader, data)
    except LocalFormatError as exc:
        raise ParseError(
            f"Could not parse {label} file ({path}): {exc}", path=path, file_format=label
        ) from exc

    if isinstance(content, SectorFile):
        summary = content.name or "unnamed sector"
    else:
        summary = f"{len(content)} intersections"
    await channel.send(Message.info(f"Parsing {label} complete: {path} ({summary})"))
    return EuroscopeFile(path=path, content=content)


def read_bytes(path: Path, kind: FileKind) -> bytes:
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise OpenError(
            f"Could not open {kind.label} file ({path}): {exc}", path=path, file_format=kind.label
        ) from exc
    with handle:
        try:
            return handle.read()
        except OSError as exc:
            raise ReadError(
                f"Could not read {kind.label} file ({path}): {exc}",
                path=path,
                file_format=kind.label,
            ) from exc


def _list_files(directory: Path) -> list[Path]:
    return sorted(path for path in directory.iterdir() if path.is_file())
