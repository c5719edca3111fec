# planegeo

Planar geometry for Python, with no runtime dependencies. The package has these modules:

- `planegeo.geometry`: the geometry types `Point`, `MultiPoint`, `LineString`, `Ring`, `MultiLineString`, `Polygon`, `MultiPolygon`, `Collection` and `Bound`, plus the `Orientation` enum.
- `planegeo.rounding`: `round_geometry`, which rounds the coordinates of any of these geometries.
- `planegeo.quadtree`: `Quadtree`, a point quadtree over a fixed `Bound`, with `PointOutsideOfBoundsError` and `point_of`.
- `planegeo.maxheap`: `MaxHeap` and `HeapItem`, a max-heap keyed on distance. The quadtree uses it for k-nearest queries.
- `planegeo.simplify`: the `Simplifier` base class, `DouglasPeuckerSimplifier` and `RadialSimplifier`, and the factories `douglas_peucker` and `radial`.
- `planegeo.visvalingam`: `VisvalingamSimplifier`, the factories `visvalingam`, `visvalingam_threshold` and `visvalingam_keep`, and `double_triangle_area`.

## Installation

```
pip install planegeo
```

## Geometry types

`Point` is a named tuple `(x, y)`. `Bound` is a frozen rectangle given by its `min` and `max` corners, and it has `contains(point)` and `pad(distance)`. The line-like types are `list` subclasses: `LineString`, `Ring`, `MultiPoint`, `MultiLineString`, `Polygon` (its outer ring first, then any holes), `MultiPolygon` and `Collection`.

```python
from planegeo.geometry import Ring, Orientation

ring = Ring([(0, 0), (0.001, 0), (0.001, 0.001), (0, 0.001), (0, 0)])
ring.closed()                              # True: 4+ points, first equals last
ring.orientation() is Orientation.CCW      # True
ring.bound()                               # Bound(min=Point(0, 0), max=Point(0.001, 0.001))
ring.reverse()                             # in place
ring.orientation() is Orientation.CW       # True
```

`Ring.orientation()` returns `Orientation.DEGENERATE` when the ring has no area. It raises `ValueError` for an empty ring. Computing the bound of an empty ring or line raises `ValueError` too.

## Rounding

```python
from planegeo.geometry import Bound, LineString, Point
from planegeo.rounding import round_geometry

round_geometry(Point(0.123456789, -0.123456789))   # Point(0.123457, -0.123457)
round_geometry(Point(0.15, -0.15), 10)             # Point(0.2, -0.2)
round_geometry(LineString([(0.007, -0.007)]), 100) # LineString([Point(0.01, -0.01)])
```

The default factor is `1_000_000`, which keeps 6 decimal places. Ties round away from zero. Points and bounds come back as new values. Line-like geometries are rounded in place and then returned. Any other type raises `TypeError`.

## Quadtree

```python
from planegeo.geometry import Bound, Point
from planegeo.quadtree import PointOutsideOfBoundsError, Quadtree

tree = Quadtree(Bound(Point(0, 0), Point(5, 5)))
for i in range(6):
    tree.add(Point(i, i))

tree.find(Point(2.25, 2.25))                    # Point(2, 2)
tree.k_nearest(Point(2.25, 2.25), 3)            # [Point(2, 2), Point(3, 3), Point(1, 1)]
tree.k_nearest(Point(0.1, 0.1), 5, max_distance=1)  # [Point(0, 0)]
tree.in_bound(Bound(Point(0, 0), Point(2, 2)))  # the three points inside
tree.remove(Point(2, 2))                        # True

try:
    tree.add(Point(10, 10))
except PointOutsideOfBoundsError:
    pass
```

The tree can store your own objects as well as points. `point_of` finds an object's location. A `Point` is its own location. Otherwise it looks for a `point` attribute or a `point()` method. Failing both, it treats the object as an `(x, y)` pair.

- `matching`, `k_nearest_matching` and `in_bound_matching` take a filter function. Only objects the filter accepts are returned.
- `remove(pointer, eq=None)` matches on equal points by default. Pass `eq` to choose among several objects at the same location.
- `k_nearest` returns results nearest first, and `k` must be at least 1.
- Queries on an empty tree return `None` or `[]`.
- Adding `None` does nothing.

## Simplification

Every simplifier has these methods: `simplify` (any geometry), `line_string`, `ring`, `multi_line_string`, `polygon`, `multi_polygon`, `collection` and `simplify_with_indexes`.

```python
import math

from planegeo.geometry import LineString
from planegeo.simplify import douglas_peucker, radial
from planegeo.visvalingam import visvalingam, visvalingam_keep, visvalingam_threshold

line = LineString([(0, 0), (2, 0), (1, 1), (0, 2)])
douglas_peucker(0.0).simplify(line.clone())   # [(0, 0), (2, 0), (0, 2)]
douglas_peucker(2).simplify(line.clone())     # [(0, 0), (0, 2)]

radial(math.dist, 1.5).line_string(LineString([(0, 0), (1, 0), (1, 1), (0, 2)]))

visvalingam_threshold(1.1).line_string(line.clone())
visvalingam_keep(3).line_string(line.clone())

reduced, kept = douglas_peucker(1.1).simplify_with_indexes(
    LineString([(0, 0), (0.5, 0.2), (1, 0)])
)
# reduced == [(0, 0), (1, 0)], kept == [0, 2]
```

Some behaviour to know about:

- Simplifiers change the lists they are given and return them. Pass a clone if you want to keep the original.
- Lines of two points or fewer are left as they are.
- Points, multi-points and bounds are returned unchanged.
- `simplify` returns `None` when nothing is left of a geometry.
- `polygon` drops holes that shrink to two points or fewer. `multi_polygon` drops polygons whose outer ring collapses that way.
- `radial` takes the distance function it should use, for example `math.dist`.
- `visvalingam(threshold, min_points_to_keep)` combines both limits.
- `double_triangle_area(line, i1, i2, i3)` gives twice the area of the triangle formed by three points of a line.

## Limits

- There is no reading or writing of GeoJSON, WKT or any other format. `Ring.geojson_type()` only reports the type name.
- All distances and areas are planar.
- The package supplies no distance functions of its own for `radial`.

## Running the tests

```
pip install "planegeo[test]"
pytest
```