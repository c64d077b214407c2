"""Translate AIXM 5.1 basic messages into facility records.

Only the baseline time slice of a feature is read. The features the
reconciliation cares about are airports/heliports, VOR and NDB navaids and
designated points; everything else becomes an :class:`UnrecognizedRecord`.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from lxml import etree

from airac_updater.common.errors import AixmDecodeError
from airac_updater.domain.model import (
    AirportRecord,
    Coordinate,
    NdbRecord,
    UnrecognizedRecord,
    VorRecord,
    WaypointRecord,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from airac_updater.domain.model import FacilityRecord

log = getLogger(__name__)

ROOT_ELEMENT: Final[str] = "AIXMBasicMessage"
BASELINE: Final[str] = "BASELINE"

_PARSER = etree.XMLParser(huge_tree=True, resolve_entities=False, no_network=True)


class MissingValueError(ValueError):
    """A recognized feature lacks one of the values it is translated from."""


def parse_aixm(data: bytes) -> list[FacilityRecord]:
    """Decode an ``AIXMBasicMessage`` document into records, in member order."""

    try:
        root = etree.fromstring(data, parser=_PARSER)
    except etree.XMLSyntaxError as exc:
        raise AixmDecodeError(f"Malformed XML: {exc}") from exc

    root_name = etree.QName(root).localname
    if root_name != ROOT_ELEMENT:
        raise AixmDecodeError(f"Expected {ROOT_ELEMENT} document, found {root_name}")

    records: list[FacilityRecord] = []
    for feature in root.iterfind("{*}hasMember/*"):
        record = translate_feature(feature)
        if record is not None:
            records.append(record)
    return records


def translate_feature(feature: etree._Element) -> FacilityRecord | None:
    """Record for one member feature; ``None`` when a known feature is incomplete."""

    if not isinstance(feature.tag, str):
        return None
    kind = etree.QName(feature).localname
    translate = _TRANSLATORS.get(kind)
    if translate is None:
        return UnrecognizedRecord(kind)

    time_slice = baseline_time_slice(feature)
    if time_slice is None:
        log.warning("Skipping %s %s: no time slice", kind, _feature_id(feature))
        return None
    try:
        return translate(time_slice)
    except ValueError as exc:
        log.warning("Skipping %s %s: %s", kind, _feature_id(feature), exc)
        return None


def baseline_time_slice(feature: etree._Element) -> etree._Element | None:
    """The BASELINE time slice of ``feature``, else its first one."""

    slices = feature.findall("{*}timeSlice/*")
    for time_slice in slices:
        if _text(time_slice, "{*}interpretation") == BASELINE:
            return time_slice
    return slices[0] if slices else None


def read_position(element: etree._Element | None) -> Coordinate:
    """Parse a ``gml:pos`` (latitude first) into a coordinate."""

    if element is None or not (element.text or "").strip():
        raise MissingValueError("missing position")
    parts = element.text.split()
    if len(parts) < 2:
        raise ValueError(f"invalid position {element.text.strip()!r}")
    return Coordinate(latitude=float(parts[0]), longitude=float(parts[1]))


def _airport(time_slice: etree._Element) -> AirportRecord:
    return AirportRecord(
        designator=_required(time_slice, "{*}designator"),
        position=read_position(time_slice.find("{*}ARP/*/{*}pos")),
        icao=_text(time_slice, "{*}locationIndicatorICAO"),
    )


def _vor(time_slice: etree._Element) -> VorRecord:
    return VorRecord(
        designator=_required(time_slice, "{*}designator"),
        position=read_position(time_slice.find("{*}location/*/{*}pos")),
        frequency=float(_required(time_slice, "{*}frequency")),
    )


def _ndb(time_slice: etree._Element) -> NdbRecord:
    return NdbRecord(
        designator=_required(time_slice, "{*}designator"),
        position=read_position(time_slice.find("{*}location/*/{*}pos")),
        frequency=float(_required(time_slice, "{*}frequency")),
    )


def _designated_point(time_slice: etree._Element) -> WaypointRecord:
    return WaypointRecord(
        designator=_required(time_slice, "{*}designator"),
        position=read_position(time_slice.find("{*}location/*/{*}pos")),
    )


_TRANSLATORS: Final[dict[str, Callable[[etree._Element], FacilityRecord]]] = {
    "AirportHeliport": _airport,
    "VOR": _vor,
    "NDB": _ndb,
    "DesignatedPoint": _designated_point,
}


def _text(element: etree._Element, path: str) -> str | None:
    value = element.findtext(path)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _required(element: etree._Element, path: str) -> str:
    value = _text(element, path)
    if value is None:
        name = path.removeprefix("{*}")
        raise MissingValueError(f"missing {name}")
    return value


def _feature_id(feature: etree._Element) -> str:
    for name, value in feature.attrib.items():
        if etree.QName(name).localname == "id":
            return value
    return "<no id>"
