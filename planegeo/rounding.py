"""Rounding of geometry coordinates."""

from __future__ import annotations

import math

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

DEFAULT_ROUNDING_FACTOR = 1_000_000


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    truncated = float(math.trunc(value))
    if abs(value - truncated) >= 0.5:
        truncated += math.copysign(1.0, value)
    return truncated


def _round_point(point, factor: float) -> Point:
    return Point(
        _round_half_away(point[0] * factor) / factor,
        _round_half_away(point[1] * factor) / factor,
    )


def _round_points(points: list, factor: float) -> None:
    points[:] = [_round_point(p, factor) for p in points]


def round_geometry(geometry, factor: int = DEFAULT_ROUNDING_FACTOR):
    """Round every coordinate of the geometry to a multiple of ``1 / factor``.

    The default factor keeps 6 decimal places. Line-like geometries are
    modified in place and returned; points and bounds are returned as new values.
    Ties round away from zero.
    """
    if geometry is None:
        return None

    f = float(factor)

    if isinstance(geometry, Point):
        return _round_point(geometry, f)
    if isinstance(geometry, Bound):
        return Bound(_round_point(geometry.min, f), _round_point(geometry.max, f))
    if isinstance(geometry, (MultiPoint, LineString)):
        _round_points(geometry, f)
        return geometry
    if isinstance(geometry, MultiLineString):
        for line in geometry:
            _round_points(line, f)
        return geometry
    if isinstance(geometry, Polygon):
        for ring in geometry:
            _round_points(ring, f)
        return geometry
    if isinstance(geometry, MultiPolygon):
        for polygon in geometry:
            for ring in polygon:
                _round_points(ring, f)
        return geometry
    if isinstance(geometry, Collection):
        geometry[:] = [round_geometry(g, factor) for g in geometry]
        return geometry

    raise TypeError(f"geometry type not supported: {type(geometry).__name__}")