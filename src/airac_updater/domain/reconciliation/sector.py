"""Fold facility records into a sector file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from airac_updater.common.progress import Message
from airac_updater.config.reconciliation import ReconciliationConfig
from airac_updater.domain.model import (
    AirportRecord,
    Fix,
    NdbRecord,
    SectorAirport,
    SectorNdb,
    SectorVor,
    VorRecord,
    WaypointRecord,
    format_frequency,
)

from .matching import (
    Outcome,
    ReconciliationResult,
    Reporter,
    is_named_fix,
    is_near,
    log_report,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from airac_updater.domain.model import FacilityRecord, SectorFile


def reconcile_sector(
    sector: SectorFile,
    records: Iterable[FacilityRecord],
    *,
    config: ReconciliationConfig | None = None,
    report: Reporter | None = None,
) -> ReconciliationResult:
    """Update or extend ``sector`` in place from ``records``.

    The fold is sequential: a record may match an entry inserted by an
    earlier record of the same pass.
    """

    active_config = config or ReconciliationConfig()
    active_report = report or log_report
    result = ReconciliationResult()

    for record in records:
        if isinstance(record, AirportRecord):
            outcome = update_airport(sector, record, config=active_config, report=active_report)
        elif isinstance(record, VorRecord):
            outcome = update_vor(sector, record, report=active_report)
        elif isinstance(record, NdbRecord):
            outcome = update_ndb(sector, record, report=active_report)
        elif isinstance(record, WaypointRecord):
            outcome = update_fix(sector, record, config=active_config, report=active_report)
        else:
            outcome = Outcome.IGNORED
        result.count(outcome)

    return result


def update_airport(
    sector: SectorFile,
    record: AirportRecord,
    *,
    config: ReconciliationConfig,
    report: Reporter,
) -> Outcome:
    if record.icao is None:
        return Outcome.IGNORED

    for airport in sector.airports:
        if airport.designator == record.icao:
            airport.coordinate = record.position
            return Outcome.UPDATED

    report(Message.debug(f"Adding new airport: {record.icao}"))
    sector.airports.append(
        SectorAirport(
            designator=record.icao,
            coordinate=record.position,
            ctr_airspace=config.default_airspace_class,
            frequency=config.default_airport_frequency,
        )
    )
    return Outcome.INSERTED


def update_vor(sector: SectorFile, record: VorRecord, *, report: Reporter) -> Outcome:
    frequency = format_frequency(record.frequency)
    for vor in sector.vors:
        if vor.designator == record.designator and vor.frequency == frequency:
            vor.coordinate = record.position
            return Outcome.UPDATED

    report(Message.debug(f"Adding new VOR: {record.designator} {frequency}"))
    sector.vors.append(
        SectorVor(designator=record.designator, coordinate=record.position, frequency=frequency)
    )
    return Outcome.INSERTED


def update_ndb(sector: SectorFile, record: NdbRecord, *, report: Reporter) -> Outcome:
    frequency = format_frequency(record.frequency)
    for ndb in sector.ndbs:
        if ndb.designator == record.designator and ndb.frequency == frequency:
            ndb.coordinate = record.position
            return Outcome.UPDATED

    report(Message.debug(f"Adding new NDB: {record.designator} {frequency}"))
    sector.ndbs.append(
        SectorNdb(designator=record.designator, coordinate=record.position, frequency=frequency)
    )
    return Outcome.INSERTED


def update_fix(
    sector: SectorFile,
    record: WaypointRecord,
    *,
    config: ReconciliationConfig,
    report: Reporter,
) -> Outcome:
    for fix in sector.fixes:
        if fix.designator == record.designator and is_near(
            fix.coordinate, record.position, radius_m=config.fix_match_radius_m
        ):
            fix.coordinate = record.position
            return Outcome.UPDATED

    if not is_named_fix(record.designator, length=config.fix_designator_length):
        return Outcome.IGNORED

    report(Message.debug(f"Adding new Fix: {record.designator}"))
    sector.fixes.append(Fix(designator=record.designator, coordinate=record.position))
    return Outcome.INSERTED
