"""Integer 2-D coordinate with a row-major total order."""

from __future__ import annotations

import functools
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from blob_regions._validation import ensure_integer, ensure_integer_pair


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class Point:
    """
    Immutable pixel coordinate.

    Points are ordered row-major: ``y`` is compared first and ``x`` breaks
    ties, so sorting a list of points gives the order in which a raster scan
    visits them. Comparing only one axis is not a total order (two points can
    share ``x`` and still differ), and every "less-than" test in the package
    goes through this ordering.

    Parameters
    ----------
    x
        Column coordinate.
    y
        Row coordinate.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", ensure_integer(self.x, "x"))
        object.__setattr__(self, "y", ensure_integer(self.y, "y"))

    @classmethod
    def coerce(cls, value: Any) -> "Point":
        """Return ``value`` as a Point; accepts Points and ``(x, y)`` pairs."""
        if isinstance(value, cls):
            return value
        x, y = ensure_integer_pair(value, "point")
        return cls(x, y)

    def _sort_key(self) -> tuple[int, int]:
        return (self.y, self.x)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __add__(self, other: object) -> "Point":
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        if isinstance(other, tuple) and len(other) == 2:
            return Point(self.x + other[0], self.y + other[1])
        return NotImplemented

    __radd__ = __add__

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def neighbors(self) -> tuple["Point", ...]:
        """The four 4-connected neighbours (left, right, up, down)."""
        return tuple(self + offset for offset in NEIGHBOR_OFFSETS_4)


# left, right, up, down
NEIGHBOR_OFFSETS_4: tuple[Point, ...] = (
    Point(-1, 0),
    Point(1, 0),
    Point(0, -1),
    Point(0, 1),
)
