import pytest

from planegeo.geometry import LineString, Ring
from planegeo.visvalingam import (
    VisvalingamSimplifier,
    double_triangle_area,
    visvalingam,
    visvalingam_keep,
    visvalingam_threshold,
)

ZIGZAG = [(0, 0), (1, 1), (0, 2), (1, 3), (0, 4)]


@pytest.mark.parametrize(
    "threshold, expected, indexes",
    [
        (0.9, ZIGZAG, [0, 1, 2, 3, 4]),
        (1.1, [(0, 0), (0, 4)], [0, 4]),
    ],
    ids=["no reduction", "reduction"],
)
def test_visvalingam_threshold(threshold, expected, indexes):
    result, index_map = visvalingam_threshold(threshold).simplify_with_indexes(LineString(ZIGZAG))
    assert result == expected
    assert index_map == indexes


@pytest.mark.parametrize(
    "keep, expected, indexes",
    [
        (6, ZIGZAG, [0, 1, 2, 3, 4]),
        (5, ZIGZAG, [0, 1, 2, 3, 4]),
        (4, [(0, 0), (0, 2), (1, 3), (0, 4)], [0, 2, 3, 4]),
        (3, [(0, 0), (0, 2), (0, 4)], [0, 2, 4]),
        (2, [(0, 0), (0, 4)], [0, 4]),
    ],
    ids=["keep 6", "keep 5", "keep 4", "keep 3", "keep 2"],
)
def test_visvalingam_keep(keep, expected, indexes):
    result, index_map = visvalingam_keep(keep).simplify_with_indexes(LineString(ZIGZAG))
    assert result == expected
    assert index_map == indexes


@pytest.mark.parametrize(
    "threshold, keep, line, expected, indexes",
    [
        (1.1, 0, [(0, 0), (1, 1), (0, 2)], [(0, 0), (0, 2)], [0, 2]),
        (1.1, 3, [(0, 0), (1, 1), (0, 2)], [(0, 0), (1, 1), (0, 2)], [0, 1, 2]),
        (0.9, 0, [(0, 0), (1, 1), (0, 2)], [(0, 0), (1, 1), (0, 2)], [0, 1, 2]),
        (1.1, 0, ZIGZAG, [(0, 0), (0, 4)], [0, 4]),
        (1.1, 5, ZIGZAG, ZIGZAG, [0, 1, 2, 3, 4]),
        (1.1, 3, ZIGZAG, [(0, 0), (0, 2), (0, 4)], [0, 2, 4]),
        (0.1, 0, [(0, 0), (0, 1), (0, 2)], [(0, 0), (0, 2)], [0, 2]),
    ],
    ids=[
        "keep nothing",
        "keep everything",
        "not meeting threshold",
        "5 points keep nothing",
        "5 points keep everything",
        "5 points reduce to limit",
        "removes colinear points",
    ],
)
def test_visvalingam(threshold, keep, line, expected, indexes):
    result, index_map = visvalingam(threshold, keep).simplify_with_indexes(LineString(line))
    assert result == expected
    assert index_map == indexes


@pytest.mark.parametrize(
    "i1, i2, i3",
    [(0, 1, 2), (0, 2, 1), (1, 2, 0), (1, 0, 2), (2, 0, 1), (2, 1, 0)],
)
def test_double_triangle_area(i1, i2, i3):
    line = LineString([(2, 5), (5, 1), (-4, 3)])
    assert double_triangle_area(line, i1, i2, i3) == 30.0


def test_factories():
    assert visvalingam_threshold(2.0) == VisvalingamSimplifier(2.0, 0)
    assert visvalingam(1.5, 3) == VisvalingamSimplifier(1.5, 3)
    assert visvalingam_keep(4).to_keep == 4


def test_line_string_via_driver():
    line = LineString(ZIGZAG)
    result = visvalingam_threshold(1.1).line_string(line)
    assert result is line
    assert line == [(0, 0), (0, 4)]


def test_ring_keeps_type():
    ring = Ring([(0, 0), (0, 1), (0, 2), (0, 3)])
    result = visvalingam_threshold(0.1).ring(ring)
    assert isinstance(result, Ring)
    assert result == [(0, 0), (0, 3)]


def test_keep_reduces_long_line_to_count():
    line = LineString([(float(i), float(i % 2)) for i in range(20)])
    result = visvalingam_keep(7).line_string(line)
    assert len(result) == 7
    assert result[0] == (0.0, 0.0)
    assert result[-1] == (19.0, 1.0)