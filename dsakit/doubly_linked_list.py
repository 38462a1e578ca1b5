"""Doubly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional

from dsakit.linked_list import ListError


@dataclass
class _Node:
    data: int
    next: Optional["_Node"] = field(default=None, repr=False)
    prev: Optional["_Node"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A two-way linked list addressed by 0-based positions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def insert_at_end(self, value: int) -> None:
        """Append a value after the tail."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at_beginning(self, value: int) -> None:
        """Put a value in front of the head."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at_position(self, position: int, value: int) -> None:
        """Insert a value at a 0-based position; an empty list takes it as its only item."""
        if position == 0 or self._head is None:
            self.insert_at_beginning(value)
            return
        if position < 0 or position > self._size:
            raise ListError("Position out of range.")
        if position == self._size:
            self.insert_at_end(value)
            return
        previous = self._head
        for _ in range(position - 1):
            assert previous.next is not None
            previous = previous.next
        following = previous.next
        assert following is not None
        node = _Node(value, next=following, prev=previous)
        following.prev = node
        previous.next = node
        self._size += 1

    def delete_at_beginning(self) -> int:
        """Remove and return the first value."""
        if self._head is None:
            raise ListError("List is empty.")
        removed = self._head
        self._head = removed.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return removed.data

    def delete_at_end(self) -> int:
        """Remove and return the last value."""
        if self._tail is None:
            raise ListError("List is empty.")
        removed = self._tail
        self._tail = removed.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return removed.data

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"