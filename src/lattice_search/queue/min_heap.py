"""
Binary heap implementation of PriorityQueue.

Array-backed min-heap following Cormen, Leiserson, Rivest and Stein
(Section 6.5). Every element stores its own slot index in ``position``,
which the heap rewrites on every move. That gives O(1) membership tests and
lets change_priority() find an element without searching.

Usage:
    from lattice_search.queue import MinHeap

    heap = MinHeap(capacity=64)
    heap.insert(item)            # item.priority already set
    heap.change_priority(item, 0.5)
    best = heap.extract_min()
"""

import math
from typing import List, Optional

from ..errors import ElementNotPresentError, EmptyQueueError
from ..types import QueueElement
from .base import PriorityQueue

MIN_CAPACITY = 16
GROWTH_FACTOR = 1.5


class MinHeap(PriorityQueue):
    """
    Binary min-heap of QueueElements.

    Attributes:
        _elts: Backing storage; slots at index >= size are unused.
        _size: Number of elements currently in the heap.
    """

    def __init__(self, capacity: int = MIN_CAPACITY):
        """
        Create a heap with the given initial capacity.

        The capacity grows as needed, so this is only a sizing hint:
        too small costs reallocation time, too large wastes space.

        Args:
            capacity: Initial number of slots (raised to MIN_CAPACITY).
        """
        if capacity < MIN_CAPACITY:
            capacity = MIN_CAPACITY
        self._elts: List[Optional[QueueElement]] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the backing storage."""
        return len(self._elts)

    def size(self) -> int:
        return self._size

    def min(self) -> QueueElement:
        if self._size == 0:
            raise EmptyQueueError()
        return self._elts[0]

    def extract_min(self) -> QueueElement:
        if self._size == 0:
            raise EmptyQueueError()
        elts = self._elts
        smallest = elts[0]
        self._size -= 1
        last = elts[self._size]
        elts[self._size] = None
        if self._size > 0:
            # last may itself be the new minimum, so its position must be reset
            elts[0] = last
            last.position = 0
            self._heapify(0)
        else:
            elts[0] = None
        smallest.position = -1
        return smallest

    def change_priority(self, e: QueueElement, priority: float) -> None:
        if not self.contains(e):
            raise ElementNotPresentError(e)
        if priority <= e.priority:
            self._decrease_key(e, priority)
        else:
            self._increase_key(e, priority)

    def insert(self, e: QueueElement) -> None:
        if self._size == len(self._elts):
            self._grow()
        e.position = self._size
        self._elts[self._size] = e
        self._size += 1
        self.change_priority(e, e.priority)

    def contains(self, e: QueueElement) -> bool:
        pos = getattr(e, "position", -1)
        return 0 <= pos < self._size and self._elts[pos] is e

    def to_array(self) -> List[QueueElement]:
        return self._elts[:self._size]

    def is_valid(self) -> bool:
        """
        Check the heap property and position consistency.

        Intended for debugging and tests; runs in O(n).

        Returns:
            True if every parent's priority is <= its children's and every
            member's position matches its slot.
        """
        elts = self._elts
        for i in range(self._size):
            if elts[i].position != i:
                return False
            for child in (2 * i + 1, 2 * i + 2):
                if child < self._size and elts[i].priority > elts[child].priority:
                    return False
        return True

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _grow(self) -> None:
        new_capacity = max(len(self._elts) + 1, math.floor(len(self._elts) * GROWTH_FACTOR))
        self._elts.extend([None] * (new_capacity - len(self._elts)))

    def _swap(self, i: int, j: int) -> None:
        elts = self._elts
        elts[i], elts[j] = elts[j], elts[i]
        elts[i].position = i
        elts[j].position = j

    def _heapify(self, i: int) -> None:
        """Sift the element at slot i down until both children are no smaller."""
        elts = self._elts
        size = self._size
        while True:
            left = 2 * i + 1
            right = 2 * i + 2
            first = i
            if left < size and elts[left].priority < elts[first].priority:
                first = left
            if right < size and elts[right].priority < elts[first].priority:
                first = right
            if first == i:
                return
            self._swap(i, first)
            i = first

    def _increase_key(self, e: QueueElement, priority: float) -> None:
        e.priority = priority
        self._heapify(e.position)

    def _decrease_key(self, e: QueueElement, priority: float) -> None:
        e.priority = priority
        elts = self._elts
        i = e.position
        while i > 0:
            parent = (i - 1) // 2
            if elts[parent].priority <= elts[i].priority:
                break
            self._swap(parent, i)
            i = parent

    def __repr__(self) -> str:
        return f"MinHeap(size={self._size}, capacity={len(self._elts)})"


# =============================================================================
# TESTS
# =============================================================================

if __name__ == "__main__":
    class _Item:
        def __init__(self, priority: float):
            self.priority = priority
            self.position = -1

    print("MinHeap Tests")
    print("=" * 40)

    print("\n1. Ascending extraction:")
    heap = MinHeap()
    for p in (5.0, 3.0, 9.0, 1.0, 7.0):
        heap.insert(_Item(p))
    assert heap.is_valid()
    order = [heap.extract_min().priority for _ in range(heap.size())]
    assert order == [1.0, 3.0, 5.0, 7.0, 9.0]
    print(f"   {order}: ✓")

    print("\n2. Growth past minimum capacity:")
    heap = MinHeap()
    for p in range(100):
        heap.insert(_Item(float(100 - p)))
    assert heap.size() == 100 and heap.capacity >= 100
    assert heap.is_valid()
    print(f"   capacity={heap.capacity}: ✓")

    print("\n" + "=" * 40)
    print("All tests passed! ✓")
