"""Visvalingam-Whyatt line simplification."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional

from planegeo.simplify import Simplifier


def double_triangle_area(line, i1: int, i2: int, i3: int) -> float:
    """Return twice the area of the triangle formed by three points of the line."""
    a, b, c = line[i1], line[i2], line[i3]
    return abs((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0]))


class _VisItem:
    __slots__ = ("area", "point_index", "next", "previous", "index")

    def __init__(self, area: float, point_index: int) -> None:
        self.area = area
        self.point_index = point_index
        self.next: Optional[_VisItem] = None
        self.previous: Optional[_VisItem] = None
        self.index = 0


class _MinHeap:
    """A min-heap on area whose items track their own position for updates."""

    def __init__(self) -> None:
        self.items: list[_VisItem] = []

    def __len__(self) -> int:
        return len(self.items)

    def push(self, item: _VisItem) -> None:
        item.index = len(self.items)
        self.items.append(item)
        self._up(item.index)

    def pop(self) -> _VisItem:
        items = self.items
        removed = items[0]
        last = items.pop()
        if items:
            last.index = 0
            items[0] = last
            self._down(0)
        return removed

    def update(self, item: _VisItem, area: float) -> None:
        smaller = item.area > area
        item.area = area
        if smaller:
            self._up(item.index)
        else:
            self._down(item.index)

    def _up(self, i: int) -> None:
        items = self.items
        obj = items[i]
        while i > 0:
            up = ((i + 1) >> 1) - 1
            parent = items[up]
            if parent.area <= obj.area:
                break
            parent.index = i
            items[i] = parent
            obj.index = up
            items[up] = obj
            i = up

    def _down(self, i: int) -> None:
        items = self.items
        size = len(items)
        obj = items[i]
        while True:
            right = (i + 1) << 1
            left = right - 1

            down = i
            child = items[down]
            if left < size and items[left].area < child.area:
                down = left
                child = items[down]
            if right < size and items[right].area < child.area:
                down = right
                child = items[down]

            if down == i:
                break

            child.index = i
            items[i] = child
            obj.index = down
            items[down] = obj
            i = down


@dataclass
class VisvalingamSimplifier(Simplifier):
    """Removes the points forming the smallest triangles.

    Points go while their triangle area is within the threshold and more than
    ``to_keep`` points remain.
    """

    threshold: float
    to_keep: int = 0

    def _reduce(self, line, with_indexes):
        if len(line) <= self.to_keep:
            return line, (list(range(len(line))) if with_indexes else None)

        threshold = self.threshold * 2  # areas are doubled
        total = len(line)
        removed = 0

        heap = _MinHeap()
        start = _VisItem(math.inf, 0)
        heap.push(start)

        previous = start
        for i in range(1, total - 1):
            item = _VisItem(double_triangle_area(line, i - 1, i, i + 1), i)
            item.previous = previous
            heap.push(item)
            previous.next = item
            previous = item

        end = _VisItem(math.inf, total - 1)
        end.previous = previous
        previous.next = end
        heap.push(end)

        while heap:
            current = heap.pop()
            if current.area > threshold or total - removed <= self.to_keep:
                break
            nxt = current.next
            prev = current.previous
            if nxt is None or prev is None:
                # Only the end points remain; they are never removed.
                break

            prev.next = nxt
            nxt.previous = prev
            removed += 1

            if prev.previous is not None:
                area = double_triangle_area(
                    line, prev.previous.point_index, prev.point_index, nxt.point_index
                )
                heap.update(prev, max(area, current.area))

            if nxt.next is not None:
                area = double_triangle_area(
                    line, prev.point_index, nxt.point_index, nxt.next.point_index
                )
                heap.update(nxt, max(area, current.area))

        indexes = []
        item: Optional[_VisItem] = start
        while item is not None:
            indexes.append(item.point_index)
            item = item.next

        line[:] = [line[i] for i in indexes]
        return line, (indexes if with_indexes else None)


def visvalingam(threshold: float, min_points_to_keep: int) -> VisvalingamSimplifier:
    """Create a simplifier with both an area threshold and a minimum point count."""
    return VisvalingamSimplifier(threshold, min_points_to_keep)


def visvalingam_threshold(threshold: float) -> VisvalingamSimplifier:
    """Create a simplifier that removes triangles whose area is below the threshold."""
    return visvalingam(threshold, 0)


def visvalingam_keep(to_keep: int) -> VisvalingamSimplifier:
    """Create a simplifier that removes smallest triangles until ``to_keep`` points remain."""
    return visvalingam(sys.float_info.max, to_keep)