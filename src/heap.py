"""
Heap - min-heap operations over any caller-owned indexable collection.

The engine owns no storage. A collection opts in by providing five
operations (see Interface) and the free functions here keep the heap
invariant over it:

    not h.less(j, (j - 1) // 2)   for every 0 < j < len(h)

The minimum element is therefore always at index 0.

Note: none of these functions lock. Callers sharing a collection between
threads must serialize every call themselves. A less/swap implementation
that mutates the collection mid-operation gives undefined results.
"""

from abc import ABC, abstractmethod
from typing import Any


class EmptyCollection(IndexError):
    """Raised when popping from a collection of size 0."""


class IndexOutOfRange(IndexError):
    """Raised by remove/fix when the index is outside [0, len(h))."""


class Interface(ABC):
    """
    Capability contract for collections driven by this module.

    Subclassing is optional; the engine only ever calls these methods, so
    any object providing them works.
    """

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def less(self, i: int, j: int) -> bool:
        """Strict weak ordering between the elements at positions i and j."""

    @abstractmethod
    def swap(self, i: int, j: int) -> None:
        ...

    @abstractmethod
    def append(self, x: Any) -> None:
        """Grow by one, placing x at index len(self)."""

    @abstractmethod
    def remove_last(self) -> Any:
        """Shrink by one and return the element formerly at len(self) - 1."""


def init(h: Interface) -> None:
    """
    Establish the heap invariant over an arbitrarily ordered collection.

    Bottom-up: sift down every parent from the last one to the root. Total
    work is O(n) since each sift is bounded by the node's height.
    Idempotent on a collection that is already a heap.
    """
    n = len(h)
    for i in range(n // 2 - 1, -1, -1):
        _down(h, i, n)


def push(h: Interface, x: Any) -> None:
    """Add x to the heap. O(log n)."""
    h.append(x)
    _up(h, len(h) - 1)


def pop(h: Interface) -> Any:
    """
    Remove and return the minimum element. O(log n).

    Equivalent to remove(h, 0).

    Raises:
        EmptyCollection: if the collection is empty
    """
    n = len(h) - 1
    if n < 0:
        raise EmptyCollection("pop from empty heap")
    h.swap(0, n)
    _down(h, 0, n)
    return h.remove_last()


def remove(h: Interface, i: int) -> Any:
    """
    Remove and return the element at index i. O(log n).

    The last element is moved into slot i, which can break the invariant
    toward the children or toward the parent but never both, so at most
    one of the two sifts does any work.

    Raises:
        IndexOutOfRange: if i is not in [0, len(h))
    """
    n = len(h) - 1
    if i < 0 or i > n:
        raise IndexOutOfRange("remove: index out of range")
    if n != i:
        h.swap(i, n)
        if not _down(h, i, n):
            _up(h, i)
    return h.remove_last()


def fix(h: Interface, i: int) -> None:
    """
    Restore the invariant after the element at index i changed in place.

    Cheaper than remove(h, i) followed by push(h, x). O(log n).

    Raises:
        IndexOutOfRange: if i is not in [0, len(h))
    """
    n = len(h)
    if i < 0 or i >= n:
        raise IndexOutOfRange("fix: index out of range")
    if not _down(h, i, n):
        _up(h, i)


def is_heap(h: Interface) -> bool:
    """Check the invariant using only len and less. O(n)."""
    for j in range(1, len(h)):
        if h.less(j, (j - 1) // 2):
            return False
    return True


def _up(h: Interface, j: int) -> None:
    while j > 0:
        parent = (j - 1) // 2
        if not h.less(j, parent):
            break
        h.swap(parent, j)
        j = parent


def _down(h: Interface, i0: int, n: int) -> bool:
    """
    Sift the element at i0 down within the first n slots.

    Both subtrees of i0 must already be heaps. On ties between the two
    children the left one is taken.

    Returns:
        True if the element moved
    """
    i = i0
    while True:
        left = 2 * i + 1
        if left >= n:
            break
        child = left
        right = left + 1
        if right < n and h.less(right, left):
            child = right
        if not h.less(child, i):
            break
        h.swap(i, child)
        i = child
    return i > i0
