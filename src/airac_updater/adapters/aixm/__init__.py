"""AIXM 5.1 decoding and local dataset access."""

from __future__ import annotations

from .files import FileDatasetFetcher
from .translator import parse_aixm

__all__ = ["FileDatasetFetcher", "parse_aixm"]
