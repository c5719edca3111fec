"""Line simplification: shared driver plus Douglas-Peucker and radial reducers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from planegeo.geometry import (
    Bound,
    Collection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

DistanceFunc = Callable[[Point, Point], float]


class Simplifier(ABC):
    """Base for reducers that thin out the points of line-like geometries.

    Lines are reduced in place and returned.
    """

    @abstractmethod
    def _reduce(self, line: list, with_indexes: bool) -> tuple[list, Optional[list[int]]]:
        """Reduce a line of three or more points in place.

        Returns the line and, when asked for, the original indexes of the kept points.
        """

    def _run(self, line: list) -> list:
        if len(line) <= 2:
            return line
        reduced, _ = self._reduce(line, False)
        return reduced

    def simplify(self, geometry):
        """Simplify any geometry; returns None when nothing is left."""
        if geometry is None:
            return None
        if isinstance(geometry, (Point, Bound)):
            return geometry
        if isinstance(geometry, MultiPoint):
            return geometry

        if isinstance(geometry, LineString):
            result = self.line_string(geometry)
        elif isinstance(geometry, MultiLineString):
            result = self.multi_line_string(geometry)
        elif isinstance(geometry, Polygon):
            result = self.polygon(geometry)
        elif isinstance(geometry, MultiPolygon):
            result = self.multi_polygon(geometry)
        elif isinstance(geometry, Collection):
            result = self.collection(geometry)
        else:
            raise TypeError(f"unsupported type: {type(geometry).__name__}")

        return result if result else None

    def simplify_with_indexes(self, line: list) -> tuple[list, list[int]]:
        """Simplify a line, also returning the original indexes of the kept points."""
        if len(line) <= 2:
            return line, list(range(len(line)))
        reduced, indexes = self._reduce(line, True)
        return reduced, indexes

    def line_string(self, line: list) -> list:
        """Simplify a line string."""
        return self._run(line)

    def multi_line_string(self, lines: list) -> list:
        """Simplify every line of a multi-line string."""
        lines[:] = [self._run(line) for line in lines]
        return lines

    def ring(self, ring: list) -> list:
        """Simplify a ring."""
        return self._run(ring)

    def polygon(self, polygon: list) -> list:
        """Simplify every ring of a polygon, dropping holes reduced to two points or fewer."""
        kept = []
        for position, ring in enumerate(polygon):
            reduced = self._run(ring)
            if position != 0 and len(reduced) <= 2:
                continue
            kept.append(reduced)
        polygon[:] = kept
        return polygon

    def multi_polygon(self, multi_polygon: list) -> list:
        """Simplify every polygon, dropping those whose outer ring collapses."""
        kept = []
        for polygon in multi_polygon:
            reduced = self.polygon(polygon)
            if not reduced or len(reduced[0]) <= 2:
                continue
            kept.append(reduced)
        multi_polygon[:] = kept
        return multi_polygon

    def collection(self, collection: list) -> list:
        """Simplify every geometry in a collection."""
        collection[:] = [self.simplify(g) for g in collection]
        return collection


def _segment_distance_squared(a, b, point) -> float:
    x, y = a[0], a[1]
    dx = b[0] - x
    dy = b[1] - y
    if dx != 0 or dy != 0:
        t = ((point[0] - x) * dx + (point[1] - y) * dy) / (dx * dx + dy * dy)
        if t > 1:
            x, y = b[0], b[1]
        elif t > 0:
            x += dx * t
            y += dy * t
    dx = point[0] - x
    dy = point[1] - y
    return dx * dx + dy * dy


@dataclass
class DouglasPeuckerSimplifier(Simplifier):
    """Douglas-Peucker reduction: keeps points further than the threshold from the chord."""

    threshold: float

    def _reduce(self, line, with_indexes):
        keep = [False] * len(line)
        keep[0] = keep[-1] = True
        limit = self.threshold * self.threshold

        stack = [(0, len(line) - 1)]
        while stack:
            start, end = stack[-1]
            max_dist = 0.0
            max_index = 0
            for i in range(start + 1, end):
                dist = _segment_distance_squared(line[start], line[end], line[i])
                if dist > max_dist:
                    max_dist = dist
                    max_index = i

            if max_dist > limit:
                keep[max_index] = True
                stack[-1] = (start, max_index)
                stack.append((max_index, end))
            else:
                stack.pop()

        indexes = [i for i, flag in enumerate(keep) if flag]
        line[:] = [line[i] for i in indexes]
        return line, (indexes if with_indexes else None)


@dataclass
class RadialSimplifier(Simplifier):
    """Radial reduction: drops points within the threshold of the last kept point."""

    distance_func: DistanceFunc
    threshold: float

    def _reduce(self, line, with_indexes):
        indexes = [0]
        current = 0
        for i in range(1, len(line)):
            if self.distance_func(line[current], line[i]) > self.threshold:
                current = i
                indexes.append(i)

        last = len(line) - 1
        if current != last:
            indexes.append(last)

        line[:] = [line[i] for i in indexes]
        return line, (indexes if with_indexes else None)


def douglas_peucker(threshold: float) -> DouglasPeuckerSimplifier:
    """Create a Douglas-Peucker simplifier."""
    return DouglasPeuckerSimplifier(threshold)


def radial(distance_func: DistanceFunc, threshold: float) -> RadialSimplifier:
    """Create a radial simplifier using the given distance function."""
    return RadialSimplifier(distance_func, threshold)