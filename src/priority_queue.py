"""
Indexed priority queue built on the heap engine.

Each Item remembers its slot in the queue, so a caller holding an Item can
change its priority or cancel it in O(log n) without searching.
"""

from typing import Any, List

import heap
from heap import EmptyCollection, Interface


class Item:
    """
    Handle for a queued value. Treat as opaque apart from value and
    priority; index is -1 once the item has left the queue.
    """

    def __init__(self, value: Any, priority: Any) -> None:
        self.value = value
        self.priority = priority
        self.index = -1

    def __repr__(self) -> str:
        return f"Item({self.value!r}, priority={self.priority!r}, index={self.index})"


class PriorityQueue(Interface):
    """Min-priority queue: the item with the lowest priority pops first."""

    def __init__(self) -> None:
        self._items: List[Item] = []

    def __len__(self) -> int:
        return len(self._items)

    def less(self, i: int, j: int) -> bool:
        return self._items[i].priority < self._items[j].priority

    def swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]
        items[i].index = i
        items[j].index = j

    def append(self, x: Item) -> None:
        x.index = len(self._items)
        self._items.append(x)

    def remove_last(self) -> Item:
        item = self._items.pop()
        item.index = -1
        return item

    def push(self, value: Any, priority: Any) -> Item:
        item = Item(value, priority)
        heap.push(self, item)
        return item

    def pop(self) -> Item:
        return heap.pop(self)

    def peek(self) -> Item:
        if not self._items:
            raise EmptyCollection("peek from empty queue")
        return self._items[0]

    def update(self, item: Item, value: Any = None, priority: Any = None) -> None:
        """Change an item's value and/or priority and restore queue order."""
        self._check_owned(item)
        if value is not None:
            item.value = value
        if priority is not None:
            item.priority = priority
        heap.fix(self, item.index)

    def remove(self, item: Item) -> Item:
        self._check_owned(item)
        return heap.remove(self, item.index)

    def _check_owned(self, item: Item) -> None:
        i = item.index
        if i < 0 or i >= len(self._items) or self._items[i] is not item:
            raise ValueError(f"{item!r} is not in this queue")

    def __contains__(self, item: Item) -> bool:
        i = item.index
        return 0 <= i < len(self._items) and self._items[i] is item

    def __bool__(self) -> bool:
        return len(self._items) > 0

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._items)})"
