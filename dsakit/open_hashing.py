"""Hash table resolving collisions by chaining keys in per-slot buckets."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_TABLE_SIZE = 10


class ChainedHashTable:
    """Fixed-size hash table using key % size; colliding keys share a bucket."""

    def __init__(self, size: int = DEFAULT_TABLE_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._buckets: list[list[int]] = [[] for _ in range(size)]
        self._count = 0

    @property
    def size(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def insert(self, key: int) -> None:
        """Append a key to the end of its bucket."""
        self._buckets[key % len(self._buckets)].append(key)
        self._count += 1

    def bucket(self, index: int) -> list[int]:
        """Return a copy of the keys chained at a slot, in insertion order."""
        if not 0 <= index < len(self._buckets):
            raise IndexError("bucket index out of range")
        return list(self._buckets[index])

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return key in self._buckets[key % len(self._buckets)]

    def __iter__(self) -> Iterator[int]:
        for chain in self._buckets:
            yield from chain

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"ChainedHashTable(size={self.size}, keys={list(self)!r})"