"""Planar geometry types: points, bounds, lines, rings, polygons and collections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple


class Point(NamedTuple):
    """A point in the plane, stored as (x, y)."""

    x: float
    y: float

    def bound(self) -> "Bound":
        """Return the zero-area bound that holds just this point."""
        return Bound(self, self)


class Orientation(IntEnum):
    """Winding order of a ring."""

    CCW = 1
    CW = -1
    DEGENERATE = 0


@dataclass(frozen=True)
class Bound:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min: Point = Point(0.0, 0.0)
    max: Point = Point(0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", Point(*self.min))
        object.__setattr__(self, "max", Point(*self.max))

    def contains(self, point) -> bool:
        """Return True if the point lies inside the bound or on its edge."""
        x, y = point
        return self.min.x <= x <= self.max.x and self.min.y <= y <= self.max.y

    def pad(self, distance: float) -> "Bound":
        """Return a new bound grown by ``distance`` on every side."""
        return Bound(
            Point(self.min.x - distance, self.min.y - distance),
            Point(self.max.x + distance, self.max.y + distance),
        )


def _bound_of(points) -> Bound:
    points = list(points)
    if not points:
        raise ValueError("cannot compute the bound of an empty set of points")
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return Bound(Point(min(xs), min(ys)), Point(max(xs), max(ys)))


class MultiPoint(list):
    """A set of points."""

    def bound(self) -> Bound:
        """Return the rectangle around all the points."""
        return _bound_of(self)

    def clone(self) -> "MultiPoint":
        """Return a new copy of the points."""
        return type(self)(self)


class LineString(list):
    """An ordered sequence of points forming a path."""

    def reverse(self) -> None:
        """Reverse the direction of the line in place."""
        self[:] = self[::-1]

    def clone(self) -> "LineString":
        """Return a new copy of the line."""
        return type(self)(self)

    def bound(self) -> Bound:
        """Return the rectangle around the line."""
        return _bound_of(self)


class Ring(LineString):
    """A closed line describing the boundary of an area."""

    def geojson_type(self) -> str:
        """Return the GeoJSON type for a ring."""
        return "Polygon"

    def dimensions(self) -> int:
        """A ring is a two-dimensional object."""
        return 2

    def closed(self) -> bool:
        """Return True if the ring has 4+ points and its first and last match.

        Self-intersection is not checked.
        """
        return len(self) >= 4 and self[0] == self[-1]

    def bound(self) -> Bound:
        """Return the rectangle around the ring."""
        return MultiPoint(self).bound()

    def orientation(self) -> Orientation:
        """Return the winding order of the ring, computed from its planar area."""
        if not self:
            raise ValueError("an empty ring has no orientation")
        offset_x, offset_y = self[0]
        area = 0.0
        # Shift towards the origin to reduce round-off.
        for (x1, y1), (x2, y2) in zip(self[1:-1], self[2:]):
            area += (x1 - offset_x) * (y2 - offset_y) - (x2 - offset_x) * (y1 - offset_y)
        if area > 0:
            return Orientation.CCW
        if area < 0:
            return Orientation.CW
        return Orientation.DEGENERATE

    def clone(self) -> "Ring":
        """Return a new copy of the ring."""
        return Ring(self)


class MultiLineString(list):
    """A set of line strings."""

    def clone(self) -> "MultiLineString":
        """Return a deep copy of the lines."""
        return MultiLineString(line.clone() for line in self)


class Polygon(list):
    """A list of rings: the outer boundary first, then any holes."""

    def clone(self) -> "Polygon":
        """Return a deep copy of the polygon."""
        return Polygon(ring.clone() for ring in self)


class MultiPolygon(list):
    """A set of polygons."""

    def clone(self) -> "MultiPolygon":
        """Return a deep copy of the polygons."""
        return MultiPolygon(polygon.clone() for polygon in self)


class Collection(list):
    """A heterogeneous list of geometries."""