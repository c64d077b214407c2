"""Intersection list: a multi-valued mapping from designator to fixes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .primitives import Coordinate, Designator


@dataclass(kw_only=True, slots=True)
class Intersection:
    designator: Designator
    coordinate: Coordinate
    extra: tuple[str, ...] = ()


@dataclass(slots=True)
class IntersectionMap:
    """Same-named intersections may coexist at different locations."""

    _buckets: dict[Designator, list[Intersection]] = field(default_factory=dict)

    def bucket(self, designator: Designator) -> list[Intersection]:
        """Entries named ``designator`` (a live list, empty when unknown)."""

        return self._buckets.get(designator, [])

    def insert(self, intersection: Intersection) -> None:
        self._buckets.setdefault(intersection.designator, []).append(intersection)

    def __contains__(self, designator: object) -> bool:
        return designator in self._buckets

    def __iter__(self) -> Iterator[Intersection]:
        for entries in self._buckets.values():
            yield from entries

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._buckets.values())
