"""Domain primitives: scalar aliases + small value objects."""

from __future__ import annotations

from dataclasses import dataclass

type Designator = str
type FrequencyText = str


@dataclass(frozen=True, slots=True)
class Coordinate:
    """WGS-84 position in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {self.longitude}")

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


def format_frequency(value: float) -> FrequencyText:
    """Canonical display form of a navaid frequency (three decimals).

    Local datasets store frequencies as this text, so source frequencies are
    always formatted before they are compared.
    """

    return f"{value:.3f}"
