"""EuroScope controller pack files: sector files and the intersection list."""

from __future__ import annotations

from .files import EuroscopeFile, FileKind, classify
from .isec import parse_intersections, read_intersections
from .loader import load_euroscope_files
from .persistence import backup_path, write_all, write_back
from .sct import parse_sector_file, read_sector_file, serialize_sector_file

__all__ = [
    "EuroscopeFile",
    "FileKind",
    "backup_path",
    "classify",
    "load_euroscope_files",
    "parse_intersections",
    "parse_sector_file",
    "read_intersections",
    "read_sector_file",
    "serialize_sector_file",
    "write_all",
    "write_back",
]
