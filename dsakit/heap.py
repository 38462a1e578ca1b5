"""Fixed-capacity binary heaps stored in an array."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Optional


class HeapOverflow(Exception):
    """Raised when inserting into a heap that is already at capacity."""


class HeapEmpty(Exception):
    """Raised when reading from or extracting out of an empty heap."""


class Heap:
    """Array-backed binary heap with a fixed capacity.

    The element for which ``_above(a, b)`` holds sits nearer the root; the base
    class orders as a min-heap.
    """

    _above: Callable[[int, int], bool] = staticmethod(operator.lt)

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[int] = []

    @property
    def capacity(self) -> int:
        """Maximum number of keys the heap can hold."""
        return self._capacity

    @staticmethod
    def parent(i: int) -> int:
        """Index of the parent of slot i (the root is its own parent)."""
        if i < 0:
            raise ValueError("index must not be negative")
        return (i - 1) // 2 if i > 0 else 0

    @staticmethod
    def left(i: int) -> int:
        """Index of the left child of slot i."""
        if i < 0:
            raise ValueError("index must not be negative")
        return 2 * i + 1

    @staticmethod
    def right(i: int) -> int:
        """Index of the right child of slot i."""
        if i < 0:
            raise ValueError("index must not be negative")
        return 2 * i + 2

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._items):
            raise IndexError("heap index out of range")

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]

    def _sift_up(self, i: int) -> int:
        items = self._items
        while i != 0 and self._above(items[i], items[self.parent(i)]):
            parent = self.parent(i)
            self._swap(i, parent)
            i = parent
        return i

    def insert(self, key: int) -> "Heap":
        """Add a key and restore the heap order; returns the heap for chaining."""
        if len(self._items) == self._capacity:
            raise HeapOverflow("Overflow: Could not insert key")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)
        return self

    def heapify(self, i: int) -> None:
        """Sift the key at slot i down until both children are below it."""
        items = self._items
        size = len(items)
        while True:
            best = i
            for child in (self.left(i), self.right(i)):
                if child < size and self._above(items[child], items[best]):
                    best = child
            if best == i:
                return
            self._swap(i, best)
            i = best

    def build(self) -> None:
        """Restore the heap order over the whole array."""
        for i in range(len(self._items) // 2 - 1, -1, -1):
            self.heapify(i)

    def search(self, key: int) -> Optional[int]:
        """Return the slot holding key, or None if it is absent."""
        return next((i for i, value in enumerate(self._items) if value == key), None)

    def peek(self) -> int:
        """Return the root key without removing it."""
        if not self._items:
            raise HeapEmpty("heap is empty")
        return self._items[0]

    def extract(self) -> int:
        """Remove and return the root key."""
        if not self._items:
            raise HeapEmpty("heap is empty")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self.heapify(0)
        return root

    def delete_at(self, i: int) -> int:
        """Remove and return the key at slot i."""
        self._check_index(i)
        items = self._items
        while i != 0:
            parent = self.parent(i)
            self._swap(i, parent)
            i = parent
        return self.extract()

    def delete_value(self, key: int) -> bool:
        """Remove one occurrence of key; return whether it was present."""
        i = self.search(key)
        if i is None:
            return False
        last = self._items.pop()
        if i < len(self._items):
            self._items[i] = last
            self.heapify(self._sift_up(i))
        return True

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={self._items!r})"


class MinHeap(Heap):
    """Heap with the smallest key at the root."""

    _above = staticmethod(operator.lt)

    def decrease_key(self, i: int, new_value: int) -> None:
        """Lower the key at slot i and move it up as far as it belongs."""
        self._check_index(i)
        if new_value > self._items[i]:
            raise ValueError("new value is larger than the current key")
        self._items[i] = new_value
        self._sift_up(i)

    def extract_min(self) -> int:
        """Remove and return the smallest key."""
        return self.extract()


class MaxHeap(Heap):
    """Heap with the largest key at the root."""

    _above = staticmethod(operator.gt)

    def increase_key(self, i: int, new_value: int) -> None:
        """Raise the key at slot i and move it up as far as it belongs."""
        self._check_index(i)
        if new_value < self._items[i]:
            raise ValueError("new value is smaller than the current key")
        self._items[i] = new_value
        self._sift_up(i)

    def extract_max(self) -> int:
        """Remove and return the largest key."""
        return self.extract()