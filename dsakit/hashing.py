"""Closed hashing with linear, double and quadratic probing, plus key counting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Optional

DEFAULT_TABLE_SIZE = 10

Table = list[Optional[int]]
Slot = tuple[int, int]


class TableFullError(Exception):
    """Raised when a key finds no free slot in a hash table."""


def _empty_table(size: int) -> Table:
    if size <= 0:
        raise ValueError("table size must be positive")
    return [None] * size


def linear_probe_table(keys: Iterable[int], size: int = DEFAULT_TABLE_SIZE) -> Table:
    """Place keys at key % size, stepping forward one slot on each collision."""
    table = _empty_table(size)
    for key in keys:
        start = key % size
        for step in range(size):
            index = (start + step) % size
            if table[index] is None:
                table[index] = key
                break
        else:
            raise TableFullError(f"no free slot for key {key}")
    return table


def double_hash_table(keys: Iterable[int], size: int = DEFAULT_TABLE_SIZE) -> Table:
    """Place keys at key % size, or at 1 + key % (size - 1) when that slot is taken."""
    if size < 2:
        raise ValueError("double hashing needs a table of at least two slots")
    table = _empty_table(size)
    for key in keys:
        for index in (key % size, 1 + key % (size - 1)):
            if table[index] is None:
                table[index] = key
                break
        else:
            raise TableFullError(f"no free slot for key {key}")
    return table


def quadratic_probe_table(keys: Iterable[int], size: int) -> Table:
    """Place keys at (key % size + i * i) % size for the first free i.

    Only as many keys as the table has slots are taken; any further keys are ignored.
    """
    table = _empty_table(size)
    for key in islice(keys, size):
        start = key % size
        # i and i + size probe the same slot, so size steps reach every candidate.
        for step in range(size):
            index = (start + step * step) % size
            if table[index] is None:
                table[index] = key
                break
        else:
            raise TableFullError(f"no free slot for key {key}")
    return table


def occupied_indices(table: Sequence[Optional[int]]) -> list[int]:
    """Return the indices of the slots that hold a key."""
    return [index for index, key in enumerate(table) if key is not None]


def first_and_last(table: Sequence[Optional[int]]) -> Optional[tuple[Slot, Slot]]:
    """Return (index, key) of the first and last occupied slots, or None if empty."""
    slots = [(index, key) for index, key in enumerate(table) if key is not None]
    if not slots:
        return None
    return slots[0], slots[-1]


def count_frequencies(values: Iterable[int]) -> Counter[int]:
    """Count how often each value occurs; absent values count as zero."""
    return Counter(values)