"""Fold designated points into an intersection list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from airac_updater.common.progress import Message
from airac_updater.config.reconciliation import ReconciliationConfig
from airac_updater.domain.model import Intersection, WaypointRecord

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

    from airac_updater.domain.model import FacilityRecord, IntersectionMap


def reconcile_intersections(
    intersections: IntersectionMap,
    records: Iterable[FacilityRecord],
    *,
    config: ReconciliationConfig | None = None,
    report: Reporter | None = None,
) -> ReconciliationResult:
    """Update or extend ``intersections`` in place; only waypoints apply."""

    active_config = config or ReconciliationConfig()
    active_report = report or log_report
    result = ReconciliationResult()

    for record in records:
        if isinstance(record, WaypointRecord):
            outcome = update_intersection(
                intersections, record, config=active_config, report=active_report
            )
        else:
            outcome = Outcome.IGNORED
        result.count(outcome)

    return result


def update_intersection(
    intersections: IntersectionMap,
    record: WaypointRecord,
    *,
    config: ReconciliationConfig,
    report: Reporter,
) -> Outcome:
    for entry in intersections.bucket(record.designator):
        if is_near(entry.coordinate, record.position, radius_m=config.fix_match_radius_m):
            entry.coordinate = record.position
            return Outcome.UPDATED

    if not is_named_fix(record.designator, length=config.fix_designator_length):
        return Outcome.IGNORED

    report(Message.debug(f"Adding new Fix: {record.designator}"))
    intersections.insert(Intersection(designator=record.designator, coordinate=record.position))
    return Outcome.INSERTED
