from typing import TypeVar, Generic, List, Iterator, Callable, Optional, Any

import heap
from heap import EmptyCollection, Interface

T = TypeVar('T')


class BinaryHeap(Interface, Generic[T]):
    def __init__(self, key: Optional[Callable[[T], Any]] = None) -> None:
        self._data: List[T] = []
        self._key = key

    # Interface

    def less(self, i: int, j: int) -> bool:
        if self._key is None:
            return self._data[i] < self._data[j]
        return self._key(self._data[i]) < self._key(self._data[j])

    def swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def append(self, x: T) -> None:
        self._data.append(x)

    def remove_last(self) -> T:
        return self._data.pop()

    # Queue operations

    def push(self, value: T) -> None:
        heap.push(self, value)

    def pop(self) -> T:
        return heap.pop(self)

    def peek(self) -> T:
        if not self._data:
            raise EmptyCollection("peek from empty heap")
        return self._data[0]

    def remove(self, index: int) -> T:
        return heap.remove(self, index)

    def fix(self, index: int) -> None:
        heap.fix(self, index)

    def replace_at(self, index: int, value: T) -> None:
        """Overwrite the element at index and move it to its new place."""
        if index < 0 or index >= len(self._data):
            raise heap.IndexOutOfRange("replace_at: index out of range")
        self._data[index] = value
        heap.fix(self, index)

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap(self._key)
        clone._data = self._data.copy()
        return clone

    @staticmethod
    def from_array(arr: List[T], key: Optional[Callable[[T], Any]] = None) -> 'BinaryHeap[T]':
        """Build a heap from an array in O(n).

        Note: Creates a shallow copy of the input array.
        """
        h: BinaryHeap[T] = BinaryHeap(key)
        h._data = list(arr)
        heap.init(h)
        return h

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data})"

    def __str__(self) -> str:
        return f"BinaryHeap(size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.pop()
