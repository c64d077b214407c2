"""EuroScope degree-minute-second coordinate notation (``N050.01.59.000``)."""

from __future__ import annotations

import re
from typing import Final

_DMS: Final = re.compile(
    r"^(?P<hemisphere>[NSEW])(?P<degrees>\d{1,3})\.(?P<minutes>\d{1,2})\.(?P<seconds>\d{1,2}(?:\.\d*)?)$",
    re.IGNORECASE,
)
_MS_PER_DEGREE: Final[int] = 3_600_000


def parse_dms(value: str, *, axis: str) -> float:
    """Parse one coordinate; ``axis`` is ``"lat"`` or ``"lon"``.

    Raises ``ValueError`` for malformed text, a hemisphere letter of the wrong
    axis, or minutes/seconds of 60 and above.
    """

    match = _DMS.match(value.strip())
    if match is None:
        raise ValueError(f"invalid coordinate {value!r}")

    hemisphere = match["hemisphere"].upper()
    allowed = "NS" if axis == "lat" else "EW"
    if hemisphere not in allowed:
        raise ValueError(f"invalid hemisphere {hemisphere!r} for {axis} in {value!r}")

    degrees = int(match["degrees"])
    minutes = int(match["minutes"])
    seconds = float(match["seconds"])
    if minutes >= 60 or seconds >= 60:
        raise ValueError(f"invalid coordinate {value!r}")

    decimal = degrees + minutes / 60 + seconds / 3600
    return -decimal if hemisphere in "SW" else decimal


def format_dms(value: float, *, axis: str) -> str:
    """Format decimal degrees, rounded to a millisecond of arc."""

    positive, negative = ("N", "S") if axis == "lat" else ("E", "W")
    hemisphere = negative if value < 0 else positive

    total_ms = round(abs(value) * _MS_PER_DEGREE)
    degrees, remainder = divmod(total_ms, _MS_PER_DEGREE)
    minutes, remainder = divmod(remainder, 60_000)
    seconds = remainder / 1000
    return f"{hemisphere}{degrees:03d}.{minutes:02d}.{seconds:06.3f}"


def parse_latitude(value: str) -> float:
    return parse_dms(value, axis="lat")


def parse_longitude(value: str) -> float:
    return parse_dms(value, axis="lon")


def format_latitude(value: float) -> str:
    return format_dms(value, axis="lat")


def format_longitude(value: float) -> str:
    return format_dms(value, axis="lon")
