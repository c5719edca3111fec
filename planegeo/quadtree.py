"""A point quadtree over rectangular partitions of a fixed bound."""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

from planegeo.geometry import Bound, Point
from planegeo.maxheap import MaxHeap

FilterFunc = Callable[[Any], bool]


class PointOutsideOfBoundsError(ValueError):
    """Raised when adding a point that lies outside the tree's bound."""

    def __init__(self, message: str = "quadtree: point outside of bounds") -> None:
        super().__init__(message)


def point_of(pointer: Any) -> Point:
    """Return the location of a stored object.

    A pair of coordinates is its own location; any other object must have a
    ``point`` attribute, or a ``point()`` method, giving its location.
    """
    if isinstance(pointer, Point):
        return pointer
    attr = getattr(pointer, "point", None)
    if attr is not None:
        value = attr() if callable(attr) else attr
        return Point(*value)
    x, y = pointer
    return Point(x, y)


def _distance_squared(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def _square_around(point: Point, radius: float) -> Bound:
    return Bound(
        Point(point[0] - radius, point[1] - radius),
        Point(point[0] + radius, point[1] + radius),
    )


def _child_index(cx: float, cy: float, point: Point) -> int:
    i = 2 if point[1] <= cy else 0
    if point[0] >= cx:
        i += 1
    return i


class _Node:
    __slots__ = ("value", "children")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.children: list[Optional[_Node]] = [None, None, None, None]


class _FindVisitor:
    def __init__(self, point: Point, filter_func: Optional[FilterFunc], bound: Bound) -> None:
        self.point = point
        self.filter = filter_func
        self.bound = bound
        self.closest: Optional[_Node] = None
        self.min_dist_squared = math.inf

    def visit(self, node: _Node) -> None:
        if self.filter is not None and not self.filter(node.value):
            return
        d = _distance_squared(point_of(node.value), self.point)
        if d < self.min_dist_squared:
            self.min_dist_squared = d
            self.closest = node
            self.bound = _square_around(self.point, math.sqrt(d))


class _NearestVisitor:
    def __init__(
        self,
        point: Point,
        filter_func: Optional[FilterFunc],
        k: int,
        bound: Bound,
        max_dist_squared: float,
    ) -> None:
        self.point = point
        self.filter = filter_func
        self.k = k
        self.heap = MaxHeap()
        self.bound = bound
        self.max_dist_squared = max_dist_squared

    def visit(self, node: _Node) -> None:
        if self.filter is not None and not self.filter(node.value):
            return
        d = _distance_squared(point_of(node.value), self.point)
        if d < self.max_dist_squared:
            self.heap.push(node.value, d)
            if len(self.heap) > self.k:
                self.heap.pop()
                top = self.heap.peek()
                self.max_dist_squared = top.distance
                self.bound = _square_around(self.point, math.sqrt(top.distance))


class _InBoundVisitor:
    def __init__(self, bound: Bound, filter_func: Optional[FilterFunc]) -> None:
        self.bound = bound
        self.filter = filter_func
        self.point = Point(0.0, 0.0)
        self.pointers: list[Any] = []

    def visit(self, node: _Node) -> None:
        if self.filter is not None and not self.filter(node.value):
            return
        if self.bound.contains(point_of(node.value)):
            self.pointers.append(node.value)


class Quadtree:
    """A two-dimensional recursive subdivision of stored objects.

    Every object lives in its own node, either inside the tree or as a leaf.
    """

    def __init__(self, bound: Bound) -> None:
        self._bound = bound
        self._root: Optional[_Node] = None

    def bound(self) -> Bound:
        """Return the bound the tree was created with."""
        return self._bound

    def _extent(self) -> tuple[float, float, float, float]:
        b = self._bound
        return b.min.x, b.max.x, b.min.y, b.max.y

    def add(self, pointer: Any) -> None:
        """Insert an object; its point must lie within the tree's bound."""
        if pointer is None:
            return

        point = point_of(pointer)
        if not self._bound.contains(point):
            raise PointOutsideOfBoundsError()

        if self._root is None:
            self._root = _Node(pointer)
            return

        node = self._root
        left, right, bottom, top = self._extent()
        while True:
            cy = (bottom + top) / 2.0
            if point[1] <= cy:
                top = cy
                i = 2
            else:
                bottom = cy
                i = 0

            cx = (left + right) / 2.0
            if point[0] >= cx:
                left = cx
                i += 1
            else:
                right = cx

            child = node.children[i]
            if child is None:
                node.children[i] = _Node(pointer)
                return
            node = child

    def _walk(self, visitor) -> None:
        if self._root is None:
            return
        stack = [(self._root, *self._extent())]
        while stack:
            node, left, right, bottom, top = stack.pop()
            b = visitor.bound
            if left > b.max.x or right < b.min.x or bottom > b.max.y or top < b.min.y:
                continue

            if node.value is not None:
                visitor.visit(node)

            if all(child is None for child in node.children):
                continue

            cx = (left + right) / 2.0
            cy = (bottom + top) / 2.0
            quadrants = (
                (left, cx, cy, top),
                (cx, right, cy, top),
                (left, cx, bottom, cy),
                (cx, right, bottom, cy),
            )

            start = _child_index(cx, cy, visitor.point)
            ordered = [(start + offset) % 4 for offset in range(4)]
            for k in reversed(ordered):
                child = node.children[k]
                if child is not None:
                    stack.append((child, *quadrants[k]))

    def remove(self, pointer: Any, eq: Optional[FilterFunc] = None) -> bool:
        """Remove an object, returning whether one was found.

        By default an object matches when its point equals the given one;
        ``eq`` can select more precisely among objects at the same point.
        """
        point = point_of(pointer)
        if eq is None:
            def eq(candidate: Any) -> bool:
                return point_of(candidate) == point

        visitor = _FindVisitor(point, eq, self._bound)
        self._walk(visitor)

        if visitor.closest is None:
            return False
        _remove_node(visitor.closest)
        return True

    def find(self, point) -> Any:
        """Return the stored object closest to the point, or None if empty."""
        return self.matching(point, None)

    def matching(self, point, filter_func: Optional[FilterFunc] = None) -> Any:
        """Return the closest stored object accepted by the filter, or None."""
        if self._root is None:
            return None
        visitor = _FindVisitor(Point(*point), filter_func, self._bound)
        self._walk(visitor)
        if visitor.closest is None:
            return None
        return visitor.closest.value

    def k_nearest(self, point, k: int, max_distance: Optional[float] = None) -> list:
        """Return up to k closest stored objects, nearest first."""
        return self.k_nearest_matching(point, k, None, max_distance)

    def k_nearest_matching(
        self,
        point,
        k: int,
        filter_func: Optional[FilterFunc] = None,
        max_distance: Optional[float] = None,
    ) -> list:
        """Return up to k closest objects accepted by the filter, nearest first.

        Only objects closer than ``max_distance`` are considered when it is given.
        """
        if self._root is None:
            return []
        if k < 1:
            raise ValueError("k must be at least 1")

        max_dist_squared = math.inf if max_distance is None else max_distance * max_distance
        visitor = _NearestVisitor(Point(*point), filter_func, k, self._bound, max_dist_squared)
        self._walk(visitor)

        furthest_first = [visitor.heap.pop().pointer for _ in range(len(visitor.heap))]
        furthest_first.reverse()
        return furthest_first

    def in_bound(self, bound: Bound) -> list:
        """Return all stored objects whose points lie within the bound."""
        return self.in_bound_matching(bound, None)

    def in_bound_matching(self, bound: Bound, filter_func: Optional[FilterFunc] = None) -> list:
        """Return all stored objects within the bound accepted by the filter."""
        if self._root is None:
            return []
        visitor = _InBoundVisitor(bound, filter_func)
        self._walk(visitor)
        return visitor.pointers


def _remove_node(node: _Node) -> None:
    while True:
        while True:
            index = next((i for i, child in enumerate(node.children) if child is not None), None)
            if index is None:
                node.value = None
                return
            if node.children[index].value is None:
                node.children[index] = None
                continue
            break

        child = node.children[index]
        node.value = child.value
        node = child