"""A max-heap keyed on distance, used to keep the k nearest candidates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class HeapItem:
    """A pointer stored in the heap together with its distance."""

    pointer: Any
    distance: float


class MaxHeap:
    """A binary heap that keeps the item with the greatest distance on top.

    When a closer candidate turns up, the furthest one can be popped off.
    """

    def __init__(self) -> None:
        self._items: list[HeapItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def peek(self) -> HeapItem:
        """Return the item with the greatest distance without removing it."""
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0]

    def push(self, pointer: Any, distance: float) -> None:
        """Add a pointer with its distance to the heap."""
        items = self._items
        item = HeapItem(pointer, distance)
        items.append(item)

        i = len(items) - 1
        while i > 0:
            up = ((i + 1) >> 1) - 1
            parent = items[up]
            if distance < parent.distance:
                break
            items[i] = parent
            items[up] = item
            i = up

    def pop(self) -> HeapItem:
        """Remove and return the item with the greatest distance."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")

        removed = items[0]
        last = items.pop()
        if not items:
            return removed

        items[0] = last
        i = 0
        size = len(items)
        while True:
            right = (i + 1) << 1
            left = right - 1

            child_index = i
            child = items[i]
            if left < size and child.distance < items[left].distance:
                child_index = left
                child = items[left]
            if right < size and child.distance < items[right].distance:
                child_index = right
                child = items[right]

            if child_index == i:
                break

            items[i] = child
            items[child_index] = last
            i = child_index

        return removed