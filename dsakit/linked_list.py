"""Singly linked list with positional insertion, deletion and rotation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


class ListError(Exception):
    """Raised when a list operation cannot be carried out."""


@dataclass
class _Node:
    data: int
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list of values, addressed by 1-based positions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> _Node:
        """Return the node at a 1-based position known to be in range."""
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise ListError("Position out of range.")

    def _require_items(self) -> None:
        if self._head is None:
            raise ListError("Linked List is empty.")

    def insert_at_end(self, value: int) -> None:
        """Append a value after the last node."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            *_, last = self._nodes()
            last.next = node
        self._size += 1

    def insert_at_beginning(self, value: int) -> None:
        """Put a value in front of the first node."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at_position(self, value: int, position: int) -> None:
        """Insert a value so that it ends up at the given 1-based position."""
        if position == 1:
            self.insert_at_beginning(value)
            return
        if position < 1 or position > self._size + 1:
            raise ListError("Position out of range.")
        previous = self._node_at(position - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def delete_at_beginning(self) -> int:
        """Remove and return the first value."""
        self._require_items()
        assert self._head is not None
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.data

    def delete_at_end(self) -> int:
        """Remove and return the last value."""
        self._require_items()
        if self._size == 1:
            return self.delete_at_beginning()
        previous = self._node_at(self._size - 1)
        assert previous.next is not None
        removed = previous.next
        previous.next = None
        self._size -= 1
        return removed.data

    def delete_at_position(self, position: int) -> int:
        """Remove and return the value at the given 1-based position."""
        self._require_items()
        if position == 1:
            return self.delete_at_beginning()
        if position < 1 or position > self._size:
            raise ListError("Position out of range.")
        previous = self._node_at(position - 1)
        assert previous.next is not None
        removed = previous.next
        previous.next = removed.next
        self._size -= 1
        return removed.data

    def delete_by_value(self, value: int) -> None:
        """Remove the first node that holds the value."""
        self._require_items()
        assert self._head is not None
        if self._head.data == value:
            self.delete_at_beginning()
            return
        for node in self._nodes():
            if node.next is not None and node.next.data == value:
                node.next = node.next.next
                self._size -= 1
                return
        raise ListError("Element not found.")

    def left_shift(self, k: int) -> None:
        """Rotate the list left by k, counting k modulo one more than its length."""
        if k < 0:
            raise ValueError("shift must not be negative")
        if self._head is None or k == 0:
            return
        k %= self._size + 1
        if k in (0, self._size):
            return
        new_tail = self._node_at(k)
        new_head = new_tail.next
        assert new_head is not None
        *_, last = self._nodes()
        last.next = self._head
        new_tail.next = None
        self._head = new_head

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        if self._head is None:
            return "Linked List is empty."
        return "Linked List: " + " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"