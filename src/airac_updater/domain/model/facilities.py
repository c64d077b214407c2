"""Facility records decoded from the source datasets.

Records are immutable and only ever read by the reconciliation fold. The
union is closed: every source feature that is not one of the known kinds is
represented by :class:`UnrecognizedRecord` and ignored downstream.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .primitives import Coordinate, Designator


@dataclass(frozen=True, slots=True)
class AirportRecord:
    designator: Designator
    position: Coordinate
    icao: Designator | None = None


@dataclass(frozen=True, slots=True)
class VorRecord:
    designator: Designator
    position: Coordinate
    frequency: float


@dataclass(frozen=True, slots=True)
class NdbRecord:
    designator: Designator
    position: Coordinate
    frequency: float


@dataclass(frozen=True, slots=True)
class WaypointRecord:
    designator: Designator
    position: Coordinate


@dataclass(frozen=True, slots=True)
class UnrecognizedRecord:
    kind: str


type FacilityRecord = AirportRecord | VorRecord | NdbRecord | WaypointRecord | UnrecognizedRecord
