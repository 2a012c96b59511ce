import sys
import os
import unittest

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import heap
from heap import EmptyCollection
from priority_queue import Item, PriorityQueue


def drain(pq):
    out = []
    while pq:
        out.append(pq.pop().value)
    return out


class TestPriorityQueueBasic(unittest.TestCase):
    def test_new_queue_is_empty(self):
        pq = PriorityQueue()
        self.assertEqual(len(pq), 0)
        self.assertFalse(pq)

    def test_pop_empty_raises(self):
        with self.assertRaises(EmptyCollection):
            PriorityQueue().pop()

    def test_peek_empty_raises(self):
        with self.assertRaises(EmptyCollection):
            PriorityQueue().peek()

    def test_pops_lowest_priority_first(self):
        pq = PriorityQueue()
        for value, priority in [("banana", 3), ("apple", 2), ("pear", 4), ("orange", 1)]:
            pq.push(value, priority)
        self.assertEqual(pq.peek().value, "orange")
        self.assertEqual(drain(pq), ["orange", "apple", "banana", "pear"])

    def test_push_returns_tracked_item(self):
        pq = PriorityQueue()
        item = pq.push("a", 5)
        self.assertIsInstance(item, Item)
        self.assertEqual(item.index, 0)
        self.assertIn(item, pq)

    def test_popped_item_is_detached(self):
        pq = PriorityQueue()
        item = pq.push("a", 1)
        self.assertIs(pq.pop(), item)
        self.assertEqual(item.index, -1)
        self.assertNotIn(item, pq)


class TestPriorityQueueIndexTracking(unittest.TestCase):
    def assertIndexesConsistent(self, pq):
        for i in range(len(pq)):
            self.assertEqual(pq._items[i].index, i)

    def test_indexes_follow_swaps(self):
        pq = PriorityQueue()
        for p in [9, 4, 7, 1, 8, 2, 6]:
            pq.push(str(p), p)
            self.assertIndexesConsistent(pq)
        while pq:
            pq.pop()
            self.assertIndexesConsistent(pq)

    def test_update_priority_moves_item_to_front(self):
        pq = PriorityQueue()
        items = {v: pq.push(v, p) for v, p in [("a", 5), ("b", 3), ("c", 8)]}
        pq.update(items["c"], priority=1)
        self.assertIs(pq.peek(), items["c"])
        self.assertEqual(drain(pq), ["c", "b", "a"])

    def test_update_priority_moves_item_back(self):
        pq = PriorityQueue()
        items = {v: pq.push(v, p) for v, p in [("a", 1), ("b", 3), ("c", 8)]}
        pq.update(items["a"], priority=10)
        self.assertEqual(drain(pq), ["b", "c", "a"])

    def test_update_value_only(self):
        pq = PriorityQueue()
        item = pq.push("old", 1)
        pq.update(item, value="new")
        self.assertEqual(pq.pop().value, "new")

    def test_update_zero_priority_is_applied(self):
        pq = PriorityQueue()
        pq.push("a", 1)
        item = pq.push("b", 2)
        pq.update(item, priority=0)
        self.assertIs(pq.peek(), item)

    def test_remove_item(self):
        pq = PriorityQueue()
        items = [pq.push(str(p), p) for p in range(10)]
        removed = pq.remove(items[4])
        self.assertIs(removed, items[4])
        self.assertEqual(removed.index, -1)
        self.assertTrue(heap.is_heap(pq))
        self.assertIndexesConsistent(pq)
        self.assertEqual(drain(pq), [str(p) for p in range(10) if p != 4])

    def test_remove_stale_item_raises(self):
        pq = PriorityQueue()
        item = pq.push("a", 1)
        pq.pop()
        with self.assertRaises(ValueError):
            pq.remove(item)
        with self.assertRaises(ValueError):
            pq.update(item, priority=0)

    def test_foreign_item_raises(self):
        pq = PriorityQueue()
        other = PriorityQueue()
        pq.push("x", 1)
        foreign = other.push("y", 2)
        with self.assertRaises(ValueError):
            pq.remove(foreign)
        self.assertEqual(len(pq), 1)

    def test_random_updates_and_removals(self):
        rng = np.random.default_rng(5)
        pq = PriorityQueue()
        live = [pq.push(i, int(rng.integers(0, 100))) for i in range(300)]
        for _ in range(500):
            item = live[int(rng.integers(0, len(live)))]
            if rng.random() < 0.2:
                pq.remove(item)
                live.remove(item)
            else:
                pq.update(item, priority=int(rng.integers(0, 100)))
            self.assertTrue(heap.is_heap(pq))
            self.assertIndexesConsistent(pq)
        priorities = [pq.pop().priority for _ in range(len(pq))]
        self.assertEqual(priorities, sorted(it.priority for it in live))

    def test_repr(self):
        pq = PriorityQueue()
        item = pq.push("a", 1)
        self.assertEqual(repr(pq), "PriorityQueue(size=1)")
        self.assertEqual(repr(item), "Item('a', priority=1, index=0)")


if __name__ == "__main__":
    unittest.main()
