"""Identity rules shared by the sector and intersection folds."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from geopy.distance import geodesic

if TYPE_CHECKING:
    from collections.abc import Callable

    from airac_updater.common.progress import Message
    from airac_updater.domain.model import Coordinate

log = getLogger(__name__)

type Reporter = Callable[[Message], object]


class Outcome(StrEnum):
    UPDATED = "updated"
    INSERTED = "inserted"
    IGNORED = "ignored"


@dataclass(slots=True)
class ReconciliationResult:
    """Counters of one fold over a target dataset."""

    updated: int = 0
    inserted: int = 0
    ignored: int = 0

    def count(self, outcome: Outcome) -> None:
        if outcome is Outcome.UPDATED:
            self.updated += 1
        elif outcome is Outcome.INSERTED:
            self.inserted += 1
        else:
            self.ignored += 1

    @property
    def changed(self) -> bool:
        return bool(self.updated or self.inserted)


def geodesic_distance_m(first: Coordinate, second: Coordinate) -> float:
    """Distance on the WGS-84 ellipsoid in meters."""

    return geodesic(first.as_tuple(), second.as_tuple()).meters


def is_near(first: Coordinate, second: Coordinate, *, radius_m: float) -> bool:
    return geodesic_distance_m(first, second) < radius_m


def is_named_fix(designator: str, *, length: int) -> bool:
    """Heuristic for operationally meaningful fixes.

    Coordinate-derived and numeric point codes are not named fixes: a named
    fix has exactly ``length`` characters and does not start with a digit.
    """

    return len(designator) == length and designator[0] not in string.digits


def log_report(message: Message) -> None:
    log.log(message.level.logging_level, message.content)
