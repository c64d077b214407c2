"""Error taxonomy shared by adapters and domain services.

Every error renders as a single human-readable line via ``str()`` because the
progress stream shows exactly that to the user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class AiracUpdaterError(RuntimeError):
    """Base class for all errors raised by the updater."""


# catalog -------------------------------------------------------------------


class CatalogError(AiracUpdaterError):
    """Raised when the dataset catalog cannot be used; fatal for a run."""


class CatalogFetchError(CatalogError):
    """Raised when the catalog endpoint cannot be reached or answers with an error."""


class CatalogDecodeError(CatalogError):
    """Raised when the catalog payload is not the expected JSON document."""


class DatasetNotFoundError(CatalogError):
    def __init__(self, dataset: str) -> None:
        super().__init__(f"Could not find AIXM dataset ({dataset})")
        self.dataset = dataset


# datasets ------------------------------------------------------------------


class DatasetError(AiracUpdaterError):
    """Raised when one dataset fails; recovered at the ingestion join point."""

    def __init__(self, message: str, *, dataset: str) -> None:
        super().__init__(message)
        self.dataset = dataset


class DatasetFetchError(DatasetError):
    pass


class DatasetDecodeError(DatasetError):
    pass


class AixmDecodeError(ValueError):
    """Raised by the AIXM translator for documents it cannot read."""


# local files ---------------------------------------------------------------


class LocalFileError(AiracUpdaterError):
    """Raised when a local EuroScope file cannot be opened, read or parsed."""

    def __init__(self, message: str, *, path: Path, file_format: str) -> None:
        super().__init__(message)
        self.path = path
        self.file_format = file_format


class OpenError(LocalFileError):
    pass


class ReadError(LocalFileError):
    pass


class ParseError(LocalFileError):
    pass


class LocalFormatError(ValueError):
    """Raised by the local format parsers for a malformed line."""

    def __init__(self, message: str, *, line_number: int, line: str) -> None:
        super().__init__(f"{message} (line {line_number}: {line.strip()!r})")
        self.line_number = line_number
        self.line = line


class SectorParseError(LocalFormatError):
    pass


class IntersectionParseError(LocalFormatError):
    pass


# persistence ---------------------------------------------------------------


class PersistenceError(AiracUpdaterError):
    """Raised when writing a reconciled file back to disk fails."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class RenameError(PersistenceError):
    def __init__(self, source: Path, target: Path, reason: object) -> None:
        super().__init__(f"Could not rename file ({source} -> {target}): {reason}", path=source)
        self.source = source
        self.target = target


class CreateError(PersistenceError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Could not create file ({path}): {reason}", path=path)


class WriteError(PersistenceError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Could not write to new file ({path}): {reason}", path=path)


# progress ------------------------------------------------------------------


class ChannelClosedError(AiracUpdaterError):
    """Raised when sending on a progress channel whose consumer has gone away."""
