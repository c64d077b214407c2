from __future__ import annotations

from airac_updater.common.progress import Message
from airac_updater.domain.model import (
    Coordinate,
    Intersection,
    IntersectionMap,
    VorRecord,
    WaypointRecord,
)
from airac_updater.domain.reconciliation import reconcile_intersections


def _intersections() -> IntersectionMap:
    intersections = IntersectionMap()
    intersections.insert(Intersection(designator="ANEKI", coordinate=Coordinate(50.0833, 8.75)))
    intersections.insert(Intersection(designator="ANEKI", coordinate=Coordinate(48.5, 11.25)))
    intersections.insert(
        Intersection(designator="DF123", coordinate=Coordinate(50.1, 8.6), extra=("x",))
    )
    return intersections


def test_update_is_scoped_to_nearby_entry_of_bucket() -> None:
    intersections = _intersections()
    moved = Coordinate(48.5001, 11.2501)

    result = reconcile_intersections(intersections, [WaypointRecord("ANEKI", moved)])

    assert result.updated == 1
    assert [entry.coordinate for entry in intersections.bucket("ANEKI")] == [
        Coordinate(50.0833, 8.75),
        moved,
    ]


def test_far_away_named_fix_extends_bucket() -> None:
    intersections = _intersections()
    messages: list[Message] = []

    result = reconcile_intersections(
        intersections, [WaypointRecord("ANEKI", Coordinate(45.0, 7.0))], report=messages.append
    )

    assert result.inserted == 1
    assert len(intersections.bucket("ANEKI")) == 3
    assert [message.content for message in messages] == ["Adding new Fix: ANEKI"]


def test_unnamed_point_updates_but_never_inserts() -> None:
    intersections = _intersections()

    result = reconcile_intersections(
        intersections,
        [
            WaypointRecord("DF123", Coordinate(50.1001, 8.6001)),
            WaypointRecord("9DF99", Coordinate(50.2, 8.7)),
        ],
    )

    assert (result.updated, result.inserted, result.ignored) == (1, 0, 1)
    entry = intersections.bucket("DF123")[0]
    assert entry.extra == ("x",)
    assert "9DF99" not in intersections


def test_other_records_do_not_touch_intersections() -> None:
    intersections = _intersections()

    result = reconcile_intersections(
        intersections, [VorRecord("ANEKI", Coordinate(1.0, 1.0), frequency=110.0)]
    )

    assert result.ignored == 1
    assert len(intersections) == 3
