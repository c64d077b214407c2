"""Entities of a EuroScope sector file and the file aggregate itself.

Only the coordinate of an entity is ever rewritten by reconciliation; the
remaining fields (airspace class, frequency text, comments) are curated
locally and must survive untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .primitives import Coordinate, Designator, FrequencyText


class SectionKind(StrEnum):
    INFO = "INFO"
    VOR = "VOR"
    NDB = "NDB"
    FIXES = "FIXES"
    AIRPORT = "AIRPORT"
    OTHER = "OTHER"


@dataclass(kw_only=True)
class SectorEntity:
    designator: Designator
    coordinate: Coordinate
    # format annotations carried through a parse/serialize round trip
    comment: str | None = None
    leading_lines: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class SectorAirport(SectorEntity):
    ctr_airspace: str
    frequency: FrequencyText = "000.000"


@dataclass(kw_only=True)
class SectorVor(SectorEntity):
    frequency: FrequencyText


@dataclass(kw_only=True)
class SectorNdb(SectorEntity):
    frequency: FrequencyText


@dataclass(kw_only=True)
class Fix(SectorEntity):
    pass


@dataclass(slots=True)
class SectorSection:
    """One ``[SECTION]`` block in file order.

    For typed sections ``lines`` only holds what follows the last entity;
    for every other section it holds the complete verbatim body.
    """

    kind: SectionKind
    header: str
    lines: list[str] = field(default_factory=list)


@dataclass(slots=True)
class SectorFile:
    preamble: list[str] = field(default_factory=list)
    sections: list[SectorSection] = field(default_factory=list)
    airports: list[SectorAirport] = field(default_factory=list)
    vors: list[SectorVor] = field(default_factory=list)
    ndbs: list[SectorNdb] = field(default_factory=list)
    fixes: list[Fix] = field(default_factory=list)
    encoding: str = "utf-8"
    newline: str = "\n"
    final_newline: bool = True

    @property
    def name(self) -> str:
        """Sector name: first non-comment line of ``[INFO]``."""

        for section in self.sections:
            if section.kind is not SectionKind.INFO:
                continue
            for line in section.lines:
                content = line.split(";", 1)[0].strip()
                if content:
                    return content
        return ""
