from __future__ import annotations

import pytest

from airac_updater.domain.model import Coordinate, format_frequency
from airac_updater.domain.reconciliation import geodesic_distance_m, is_named_fix


@pytest.mark.parametrize(
    ("value", "expected"),
    [(112.4999, "112.500"), (112.5, "112.500"), (345.0, "345.000"), (114.2, "114.200")],
)
def test_format_frequency(value: float, expected: str) -> None:
    assert format_frequency(value) == expected
    assert format_frequency(float(format_frequency(value))) == expected


def test_geodesic_distance_in_meters() -> None:
    one_minute_north = geodesic_distance_m(Coordinate(50.0, 8.0), Coordinate(50.0 + 1 / 60, 8.0))

    assert one_minute_north == pytest.approx(1853.0, abs=5.0)
    assert geodesic_distance_m(Coordinate(50.0, 8.0), Coordinate(50.0, 8.0)) == 0.0


@pytest.mark.parametrize(
    ("designator", "expected"),
    [("ANEKI", True), ("D123A", True), ("12345", False), ("ANEK", False), ("ANEKIS", False)],
)
def test_is_named_fix(designator: str, expected: bool) -> None:  # noqa: FBT001
    assert is_named_fix(designator, length=5) is expected


def test_coordinate_ranges() -> None:
    with pytest.raises(ValueError):
        Coordinate(90.5, 0.0)
    with pytest.raises(ValueError):
        Coordinate(0.0, -180.5)
