#!/usr/bin/env python3
"""Unit tests for the binary min-heap priority queue."""

import math
import unittest

from conftest import Item

from lattice_search.errors import ElementNotPresentError, EmptyQueueError
from lattice_search.queue import MIN_CAPACITY, MinHeap, PriorityQueue

N = 100


class TestOrdering(unittest.TestCase):
    """Extraction order for various insertion orders."""

    def _drain(self, q):
        out = []
        while q.size() > 0:
            out.append(q.extract_min())
        return out

    def test_ascending(self):
        """Elements inserted in ascending order come out ascending."""
        q = MinHeap(N)
        for i in range(N):
            q.insert(Item(float(i)))
        self.assertEqual(q.size(), N)
        priorities = [e.priority for e in self._drain(q)]
        self.assertEqual(priorities, [float(i) for i in range(N)])

    def test_descending(self):
        """Elements inserted in descending order come out ascending."""
        q = MinHeap(N)
        for i in range(N):
            q.insert(Item(float(N - i - 1)))
        priorities = [e.priority for e in self._drain(q)]
        self.assertEqual(priorities, [float(i) for i in range(N)])

    def test_equal_keys(self):
        """Duplicate priorities are all kept and grouped on extraction."""
        q = MinHeap(N)
        items = []
        for p in (5, 3, 4, 7):
            for _ in range(5):
                item = Item(float(p))
                q.insert(item)
                items.append(item)

        self.assertEqual(q.size(), 20)
        for item in items:
            self.assertTrue(q.contains(item))

        for expected in (3.0, 4.0, 5.0, 7.0):
            for _ in range(5):
                e = q.extract_min()
                if q.size() > 0:
                    self.assertTrue(q.contains(q.min()))
                self.assertEqual(e.priority, expected)


class TestChangePriority(unittest.TestCase):
    """Decrease-key and increase-key."""

    def setUp(self):
        self.q = MinHeap(N)
        self.items = []
        for i in range(N):
            item = Item(float(N - i - 1))
            self.q.insert(item)
            self.items.append(item)

    def test_mixed_changes(self):
        """Decreased elements move to the front, increased ones to the back."""
        q, items = self.q, self.items
        q.change_priority(items[N - 1], -2)
        q.change_priority(items[N // 2], -1)
        q.change_priority(items[N // 2 + 1], N * 2)
        self.assertTrue(q.is_valid())

        last = -math.inf
        j = 0
        while q.size() > 0:
            e = q.extract_min()
            self.assertGreater(e.priority, last)
            last = e.priority
            if j == 0:
                self.assertEqual(e.priority, -2)
            if j == 1:
                self.assertEqual(e.priority, -1)
            if q.size() == 1:
                self.assertEqual(e.priority, N - 1)
            if q.size() == 0:
                self.assertEqual(e.priority, N * 2)
            j += 1
        self.assertEqual(j, N)

    def test_reverse(self):
        """Re-prioritizing every element reverses the extraction order."""
        q, items = self.q, self.items
        for i in range(N):
            q.change_priority(items[i], float(i))
            self.assertTrue(q.is_valid())

        for j in range(N):
            e = q.extract_min()
            self.assertIs(e, items[j])
            self.assertEqual(e.priority, float(j))

    def test_same_priority_is_noop(self):
        """Changing to the current priority keeps the heap valid."""
        self.q.change_priority(self.items[10], self.items[10].priority)
        self.assertTrue(self.q.is_valid())
        self.assertEqual(self.q.size(), N)

    def test_not_present(self):
        """Changing a non-member raises ElementNotPresentError."""
        stranger = Item(1.0)
        with self.assertRaises(ElementNotPresentError):
            self.q.change_priority(stranger, 0.0)

    def test_extracted_element_not_present(self):
        """An extracted element can no longer be re-prioritized."""
        e = self.q.extract_min()
        with self.assertRaises(ElementNotPresentError):
            self.q.change_priority(e, -5.0)

    def test_stale_position_not_present(self):
        """An element whose position points at another member is not a member."""
        impostor = Item(0.0)
        impostor.position = 0
        self.assertFalse(self.q.contains(impostor))
        with self.assertRaises(ElementNotPresentError):
            self.q.change_priority(impostor, 0.0)


class TestEmptyQueue(unittest.TestCase):
    """Operations on an empty heap."""

    def test_min_raises(self):
        with self.assertRaises(EmptyQueueError):
            MinHeap().min()

    def test_extract_min_raises(self):
        with self.assertRaises(EmptyQueueError):
            MinHeap().extract_min()

    def test_empty_queue_is_index_error(self):
        """EmptyQueueError is also an IndexError."""
        with self.assertRaises(IndexError):
            MinHeap().extract_min()

    def test_drained_heap_raises(self):
        q = MinHeap()
        q.insert(Item(1.0))
        q.extract_min()
        with self.assertRaises(EmptyQueueError):
            q.min()

    def test_empty_snapshot(self):
        q = MinHeap()
        self.assertEqual(q.to_array(), [])
        self.assertEqual(len(q), 0)
        self.assertFalse(q)


class TestMembership(unittest.TestCase):
    """contains(), positions and snapshots."""

    def test_contains_after_insert(self):
        q = MinHeap()
        for p in (4.0, 2.0, 8.0, 1.0):
            item = Item(p)
            q.insert(item)
            self.assertTrue(q.contains(item))
            self.assertIn(item, q)

    def test_extract_resets_position(self):
        q = MinHeap()
        items = [Item(float(p)) for p in (3, 1, 2)]
        for item in items:
            q.insert(item)
        e = q.extract_min()
        self.assertIs(e, items[1])
        self.assertEqual(e.position, -1)
        self.assertFalse(q.contains(e))
        self.assertEqual(q.size(), 2)

    def test_positions_match_snapshot(self):
        q = MinHeap()
        items = [Item(float((i * 37) % 23)) for i in range(40)]
        for item in items:
            q.insert(item)
        for _ in range(10):
            q.extract_min()

        snapshot = q.to_array()
        self.assertEqual(len(snapshot), q.size())
        for e in snapshot:
            self.assertIs(snapshot[e.position], e)

    def test_snapshot_is_a_copy(self):
        q = MinHeap()
        q.insert(Item(1.0))
        snapshot = q.to_array()
        snapshot.clear()
        self.assertEqual(q.size(), 1)

    def test_min_does_not_remove(self):
        q = MinHeap()
        q.insert(Item(2.0))
        q.insert(Item(1.0))
        self.assertEqual(q.min().priority, 1.0)
        self.assertEqual(q.size(), 2)

    def test_insert_uses_element_priority(self):
        """An element enters with the priority it already carries."""
        q = MinHeap()
        q.insert(Item(5.0))
        q.insert(Item(-1.0))
        q.insert(Item(math.inf))
        self.assertEqual(q.min().priority, -1.0)
        self.assertTrue(q.is_valid())


class TestCapacity(unittest.TestCase):
    """Initial capacity and growth."""

    def test_minimum_capacity(self):
        self.assertEqual(MinHeap(0).capacity, MIN_CAPACITY)
        self.assertEqual(MinHeap(3).capacity, MIN_CAPACITY)
        self.assertEqual(MinHeap().capacity, MIN_CAPACITY)

    def test_requested_capacity(self):
        self.assertEqual(MinHeap(100).capacity, 100)

    def test_growth(self):
        """Inserting past capacity grows by half."""
        q = MinHeap()
        for i in range(MIN_CAPACITY + 1):
            q.insert(Item(float(-i)))
        self.assertEqual(q.capacity, MIN_CAPACITY + MIN_CAPACITY // 2)
        self.assertEqual(q.size(), MIN_CAPACITY + 1)
        self.assertTrue(q.is_valid())
        self.assertEqual(q.min().priority, -float(MIN_CAPACITY))

    def test_is_priority_queue(self):
        self.assertIsInstance(MinHeap(), PriorityQueue)


if __name__ == "__main__":
    unittest.main()
