"""Last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class StackUnderflow(Exception):
    """Raised when taking from an empty stack."""


class Stack:
    """A LIFO stack; iteration runs from the top down."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Put a value on top."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflow("Stack Underflow")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflow("Stack Underflow")
        return self._items[-1]

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(reversed(self._items))!r})"