"""Local EuroScope files: kinds, text decoding and the loaded-file wrapper."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Final

from airac_updater.domain.model import IntersectionMap, SectorFile

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)

ISEC_FILENAME: Final[str] = "isec.txt"


class FileKind(StrEnum):
    SCT = "sct"
    ISEC = "isec"

    @property
    def label(self) -> str:
        """Name used in progress and error messages."""

        return ".sct" if self is FileKind.SCT else "isec"


@dataclass(slots=True)
class EuroscopeFile:
    """A loaded target dataset together with the path it came from."""

    path: Path
    content: SectorFile | IntersectionMap

    @property
    def kind(self) -> FileKind:
        return FileKind.SCT if isinstance(self.content, SectorFile) else FileKind.ISEC


def classify(path: Path) -> FileKind | None:
    """Kind of ``path`` by name, or ``None`` for files the updater does not handle."""

    suffix = path.suffix.lower()
    if suffix == ".sct":
        return FileKind.SCT
    if path.name.lower() == ISEC_FILENAME:
        return FileKind.ISEC
    if suffix == ".ese":
        log.debug("Skipping .ese file: %s", path)
    return None


def decode_text(data: bytes) -> tuple[str, str]:
    """Decode file content; return the text and the encoding to write it back with.

    UTF-8 (with or without byte order mark) is tried first, Latin-1 otherwise.
    """

    if data.startswith(codecs.BOM_UTF8):
        encoding = "utf-8-sig"
    else:
        encoding = "utf-8"
    try:
        return data.decode(encoding), encoding
    except UnicodeDecodeError:
        return data.decode("latin-1"), "latin-1"


def detect_newline(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"
