import random

import pytest

from planegeo.maxheap import HeapItem, MaxHeap


def test_pops_in_non_increasing_order():
    rng = random.Random(22)
    for size in range(1, 100):
        heap = MaxHeap()
        for _ in range(size):
            heap.push(None, rng.random())

        assert len(heap) == size
        current = heap.pop().distance
        while len(heap) > 0:
            following = heap.pop().distance
            assert following <= current
            current = following


def test_pop_returns_all_pushed_values_sorted():
    values = [3.0, 1.0, 4.0, 1.5, 5.0, 9.0, 2.0, 6.0]
    heap = MaxHeap()
    for value in values:
        heap.push(str(value), value)

    popped = [heap.pop() for _ in range(len(values))]
    assert [item.distance for item in popped] == sorted(values, reverse=True)
    assert [item.pointer for item in popped] == [str(v) for v in sorted(values, reverse=True)]


def test_peek_is_greatest():
    heap = MaxHeap()
    heap.push("a", 1.0)
    heap.push("b", 7.0)
    heap.push("c", 3.0)
    assert heap.peek() == HeapItem("b", 7.0)
    assert len(heap) == 3


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().peek()