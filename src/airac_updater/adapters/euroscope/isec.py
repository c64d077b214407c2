"""Reader for the EuroScope intersection list (``isec.txt``).

One intersection per line: ``DESIGNATOR LATITUDE LONGITUDE [extra ...]`` in
decimal degrees. Text after ``;`` is a comment.
"""

from __future__ import annotations

from airac_updater.common.errors import IntersectionParseError
from airac_updater.domain.model import Coordinate, Intersection, IntersectionMap

from .files import decode_text


def read_intersections(data: bytes) -> IntersectionMap:
    text, _ = decode_text(data)
    return parse_intersections(text)


def parse_intersections(text: str) -> IntersectionMap:
    intersections = IntersectionMap()
    for line_number, line in enumerate(text.splitlines(), start=1):
        fields = line.partition(";")[0].split()
        if not fields:
            continue
        if len(fields) < 3:
            raise IntersectionParseError(
                "Expected designator, latitude and longitude",
                line_number=line_number,
                line=line,
            )
        designator, latitude, longitude, *extra = fields
        try:
            coordinate = Coordinate(latitude=float(latitude), longitude=float(longitude))
        except ValueError as exc:
            raise IntersectionParseError(str(exc), line_number=line_number, line=line) from exc
        intersections.insert(
            Intersection(designator=designator, coordinate=coordinate, extra=tuple(extra))
        )
    return intersections
