"""Reconciliation of source facility records into local target datasets.

Matching is conservative: an existing entry is only touched when its identity
(designator, plus frequency or proximity where applicable) agrees with the
source record, and then only its coordinate is replaced. Unmatched records are
inserted, except waypoints whose designator does not look like a named fix.
"""

from __future__ import annotations

from .intersections import reconcile_intersections
from .matching import (
    Outcome,
    ReconciliationResult,
    Reporter,
    geodesic_distance_m,
    is_named_fix,
)
from .sector import reconcile_sector

__all__ = [
    "Outcome",
    "ReconciliationResult",
    "Reporter",
    "geodesic_distance_m",
    "is_named_fix",
    "reconcile_intersections",
    "reconcile_sector",
]
