"""Linked list with a header node that keeps the element count."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from dsakit.linked_list import ListError


@dataclass
class _Node:
    data: int
    next: Optional["_Node"] = None


class HeaderLinkedList:
    """A singly linked list whose header node stores how many items follow it."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._header = _Node(0)
        for value in values:
            self.insert_at_end(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._header.next
        while node is not None:
            yield node
            node = node.next

    def _node_before(self, position: int) -> _Node:
        """Return the node preceding a 1-based position (the header for 1)."""
        node = self._header
        for _ in range(position - 1):
            assert node.next is not None
            node = node.next
        return node

    def _require_items(self) -> None:
        if self._header.next is None:
            raise ListError("List is empty.")

    def _unlink_after(self, previous: _Node) -> int:
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        self._header.data -= 1
        return removed.data

    def insert_at_beginning(self, value: int) -> None:
        """Put a value right after the header."""
        self._header.next = _Node(value, self._header.next)
        self._header.data += 1

    def insert_at_end(self, value: int) -> None:
        """Append a value after the last node."""
        last = self._node_before(self._header.data + 1)
        last.next = _Node(value)
        self._header.data += 1

    def insert_at_position(self, value: int, position: int) -> None:
        """Insert a value so that it ends up at the given 1-based position."""
        if position == 1:
            self.insert_at_beginning(value)
        elif position == self._header.data + 1:
            self.insert_at_end(value)
        elif 1 < position <= self._header.data:
            previous = self._node_before(position)
            previous.next = _Node(value, previous.next)
            self._header.data += 1
        else:
            raise ListError("Position out of range.")

    def delete_at_beginning(self) -> int:
        """Remove and return the first value."""
        self._require_items()
        return self._unlink_after(self._header)

    def delete_at_end(self) -> int:
        """Remove and return the last value."""
        self._require_items()
        return self._unlink_after(self._node_before(self._header.data))

    def delete_at_position(self, position: int) -> int:
        """Remove and return the value at the given 1-based position."""
        self._require_items()
        if position == 1:
            return self.delete_at_beginning()
        if position == self._header.data:
            return self.delete_at_end()
        if not 1 < position < self._header.data:
            raise ListError("Position out of range.")
        return self._unlink_after(self._node_before(position))

    def delete_by_value(self, value: int) -> None:
        """Remove the first node that holds the value."""
        self._require_items()
        previous = self._header
        while previous.next is not None:
            if previous.next.data == value:
                self._unlink_after(previous)
                return
            previous = previous.next
        raise ListError("Element not found.")

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._header.data

    def __repr__(self) -> str:
        return f"HeaderLinkedList({list(self)!r})"