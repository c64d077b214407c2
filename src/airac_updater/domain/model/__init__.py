"""Domain model for facility reconciliation."""

from __future__ import annotations

from .facilities import (
    AirportRecord,
    FacilityRecord,
    NdbRecord,
    UnrecognizedRecord,
    VorRecord,
    WaypointRecord,
)
from .intersections import Intersection, IntersectionMap
from .primitives import Coordinate, Designator, FrequencyText, format_frequency
from .sector import (
    Fix,
    SectionKind,
    SectorAirport,
    SectorEntity,
    SectorFile,
    SectorNdb,
    SectorSection,
    SectorVor,
)

__all__ = [
    "AirportRecord",
    "Coordinate",
    "Designator",
    "FacilityRecord",
    "Fix",
    "FrequencyText",
    "Intersection",
    "IntersectionMap",
    "NdbRecord",
    "SectionKind",
    "SectorAirport",
    "SectorEntity",
    "SectorFile",
    "SectorNdb",
    "SectorSection",
    "SectorVor",
    "UnrecognizedRecord",
    "VorRecord",
    "WaypointRecord",
    "format_frequency",
]
