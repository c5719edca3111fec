import pytest

from planegeo.geometry import (
    Bound,
    LineString,
    MultiPoint,
    Orientation,
    Point,
    Ring,
)


@pytest.mark.parametrize(
    "ring, closed",
    [
        (Ring([Point(0, 0), Point(3, 0), Point(3, 4), Point(0, 0)]), True),
        (Ring([Point(0, 0), Point(3, 0), Point(3, 3), Point(3, 4)]), False),
        (Ring(), False),
        (Ring([Point(3, 0)]), False),
        (Ring([Point(3, 0), Point(3, 0)]), False),
        (Ring([Point(3, 0), Point(0, 0), Point(3, 0)]), False),
    ],
    ids=[
        "first must equal last",
        "not closed if last point does not match",
        "empty ring",
        "one vertex ring",
        "two vertex ring",
        "three vertex ring",
    ],
)
def test_ring_closed(ring, closed):
    assert ring.closed() is closed


@pytest.mark.parametrize(
    "ring, expected",
    [
        (
            Ring([Point(0, 0), Point(0.001, 0), Point(0.001, 0.001), Point(0, 0.001), Point(0, 0)]),
            Orientation.CCW,
        ),
        (
            Ring([Point(0, 0), Point(0, 0.001), Point(0.001, 0.001), Point(0.001, 0), Point(0, 0)]),
            Orientation.CW,
        ),
    ],
    ids=["simple box, ccw", "simple box, cw"],
)
def test_ring_orientation(ring, expected):
    assert ring.orientation() == expected
    # should work without the redundant last point
    assert Ring(ring[:-1]).orientation() == expected


def test_ring_orientation_degenerate():
    ring = Ring([Point(0, 0), Point(1, 1), Point(2, 2), Point(0, 0)])
    assert ring.orientation() == Orientation.DEGENERATE


def test_ring_orientation_empty_raises():
    with pytest.raises(ValueError):
        Ring().orientation()


def test_ring_type_and_dimensions():
    ring = Ring([Point(0, 0), Point(1, 0), Point(0, 0)])
    assert ring.geojson_type() == "Polygon"
    assert ring.dimensions() == 2


def test_ring_bound():
    ring = Ring([Point(0, 0), Point(3, -1), Point(2, 4), Point(0, 0)])
    assert ring.bound() == Bound(Point(0, -1), Point(3, 4))


def test_ring_reverse_in_place():
    ring = Ring([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 0)])
    ring.reverse()
    assert ring == [Point(0, 0), Point(1, 1), Point(1, 0), Point(0, 0)]
    assert isinstance(ring, Ring)


def test_ring_clone_is_independent():
    ring = Ring([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 0)])
    copy = ring.clone()
    assert copy == ring
    assert isinstance(copy, Ring)
    copy[1] = Point(5, 5)
    assert ring[1] == Point(1, 0)


def test_line_string_clone_and_reverse():
    line = LineString([Point(1.5, 2.5), Point(3.5, 4.5), Point(5.5, 6.5)])
    copy = line.clone()
    copy.reverse()
    assert copy == [Point(5.5, 6.5), Point(3.5, 4.5), Point(1.5, 2.5)]
    assert line[0] == Point(1.5, 2.5)


def test_multipoint_bound_empty_raises():
    with pytest.raises(ValueError):
        MultiPoint().bound()


def test_bound_contains_edges():
    bound = Bound(Point(0, 0), Point(1, 1))
    assert bound.contains(Point(0, 0))
    assert bound.contains(Point(1, 1))
    assert bound.contains(Point(0.5, 0.2))
    assert not bound.contains(Point(1.01, 0.5))
    assert not bound.contains(Point(0.5, -0.01))


def test_bound_pad():
    bound = Point(0.5, 0.5).bound().pad(0.25)
    assert bound == Bound(Point(0.25, 0.25), Point(0.75, 0.75))