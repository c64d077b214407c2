"""Reader and writer for EuroScope sector files (``.sct``).

Only the ``[VOR]``, ``[NDB]``, ``[FIXES]`` and ``[AIRPORT]`` sections are
decoded into entities. The preamble, ``[INFO]`` and every other section are
carried as raw lines, so a file that was not changed serializes back to the
same content apart from whitespace inside entity lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from airac_updater.common.errors import SectorParseError
from airac_updater.domain.model import (
    Coordinate,
    Fix,
    SectionKind,
    SectorAirport,
    SectorFile,
    SectorNdb,
    SectorSection,
    SectorVor,
)

from .coordinates import format_latitude, format_longitude, parse_latitude, parse_longitude
from .files import decode_text, detect_newline

if TYPE_CHECKING:
    from collections.abc import Sequence

    from airac_updater.domain.model import SectorEntity

TYPED_SECTIONS: Final[tuple[SectionKind, ...]] = (
    SectionKind.VOR,
    SectionKind.NDB,
    SectionKind.FIXES,
    SectionKind.AIRPORT,
)
_FIELD_COUNTS: Final[dict[SectionKind, int]] = {
    SectionKind.VOR: 4,
    SectionKind.NDB: 4,
    SectionKind.FIXES: 3,
    SectionKind.AIRPORT: 5,
}


def read_sector_file(data: bytes) -> SectorFile:
    text, encoding = decode_text(data)
    sector = parse_sector_file(text)
    sector.encoding = encoding
    return sector


def parse_sector_file(text: str) -> SectorFile:
    sector = SectorFile(
        newline=detect_newline(text),
        final_newline=text.endswith(("\n", "\r")),
    )
    section: SectorSection | None = None
    pending: list[str] = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        header = section_header(line)
        if header is not None:
            if section is not None and section.kind in TYPED_SECTIONS:
                section.lines = pending
                pending = []
            section = SectorSection(kind=header, header=line)
            sector.sections.append(section)
            continue

        if section is None:
            sector.preamble.append(line)
        elif section.kind not in TYPED_SECTIONS:
            section.lines.append(line)
        elif _is_filler(line):
            pending.append(line)
        else:
            entity = parse_entity(section.kind, line, line_number=line_number)
            entity.leading_lines = pending
            pending = []
            _entities(sector, section.kind).append(entity)

    if section is not None and section.kind in TYPED_SECTIONS:
        section.lines = pending
    return sector


def section_header(line: str) -> SectionKind | None:
    """Kind of a ``[NAME]`` header line, ``None`` when ``line`` is not a header."""

    stripped = line.strip()
    if not stripped.startswith("["):
        return None
    end = stripped.find("]")
    if end < 0:
        return None
    name = stripped[1:end].strip().upper()
    try:
        return SectionKind(name)
    except ValueError:
        return SectionKind.OTHER


def parse_entity(kind: SectionKind, line: str, *, line_number: int) -> SectorEntity:
    content, separator, remainder = line.partition(";")
    comment = separator + remainder if separator else None
    fields = content.split()

    expected = _FIELD_COUNTS[kind]
    if len(fields) != expected:
        raise SectorParseError(
            f"Expected {expected} fields in [{kind}], found {len(fields)}",
            line_number=line_number,
            line=line,
        )

    try:
        if kind is SectionKind.FIXES:
            designator, latitude, longitude = fields
            return Fix(
                designator=designator,
                coordinate=_coordinate(latitude, longitude),
                comment=comment,
            )
        if kind is SectionKind.AIRPORT:
            designator, frequency, latitude, longitude, airspace = fields
            return SectorAirport(
                designator=designator,
                coordinate=_coordinate(latitude, longitude),
                ctr_airspace=airspace,
                frequency=frequency,
                comment=comment,
            )
        designator, frequency, latitude, longitude = fields
        entity_type = SectorVor if kind is SectionKind.VOR else SectorNdb
        return entity_type(
            designator=designator,
            coordinate=_coordinate(latitude, longitude),
            frequency=frequency,
            comment=comment,
        )
    except ValueError as exc:
        raise SectorParseError(str(exc), line_number=line_number, line=line) from exc


def serialize_sector_file(sector: SectorFile) -> str:
    """Render ``sector`` with its original section order and newline style.

    Entities of a kind are written under the first section of that kind;
    kinds without a section get one appended at the end.
    """

    lines = list(sector.preamble)
    written: set[SectionKind] = set()

    for section in sector.sections:
        lines.append(section.header)
        if section.kind in TYPED_SECTIONS and section.kind not in written:
            written.add(section.kind)
            lines.extend(_entity_lines(_entities(sector, section.kind)))
        lines.extend(section.lines)

    for kind in TYPED_SECTIONS:
        entities = _entities(sector, kind)
        if kind in written or not entities:
            continue
        if lines and lines[-1].strip():
            lines.append("")
        lines.append(f"[{kind}]")
        lines.extend(_entity_lines(entities))

    text = sector.newline.join(lines)
    if lines and sector.final_newline:
        text += sector.newline
    return text


def format_entity(entity: SectorEntity) -> str:
    position = (
        f"{format_latitude(entity.coordinate.latitude)} "
        f"{format_longitude(entity.coordinate.longitude)}"
    )
    if isinstance(entity, SectorAirport):
        line = f"{entity.designator} {entity.frequency} {position} {entity.ctr_airspace}"
    elif isinstance(entity, SectorVor | SectorNdb):
        line = f"{entity.designator} {entity.frequency} {position}"
    else:
        line = f"{entity.designator} {position}"
    if entity.comment:
        line = f"{line} {entity.comment}"
    return line


def _entity_lines(entities: Sequence[SectorEntity]) -> list[str]:
    lines: list[str] = []
    for entity in entities:
        lines.extend(entity.leading_lines)
        lines.append(format_entity(entity))
    return lines


def _entities(sector: SectorFile, kind: SectionKind) -> list:
    if kind is SectionKind.VOR:
        return sector.vors
    if kind is SectionKind.NDB:
        return sector.ndbs
    if kind is SectionKind.FIXES:
        return sector.fixes
    return sector.airports


def _coordinate(latitude: str, longitude: str) -> Coordinate:
    return Coordinate(latitude=parse_latitude(latitude), longitude=parse_longitude(longitude))


def _is_filler(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith(";")
