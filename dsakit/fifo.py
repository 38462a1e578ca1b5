"""First-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class QueueUnderflow(Exception):
    """Raised when dequeuing from an empty queue."""


class Queue:
    """A FIFO queue; iteration runs from front to rear."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque()
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: int) -> None:
        """Add a value at the rear."""
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if not self._items:
            raise QueueUnderflow("Queue Underflow")
        return self._items.popleft()

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"