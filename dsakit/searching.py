"""Linear and binary search over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional


def linear_search(values: Sequence[int], key: int) -> Optional[int]:
    """Return the index of the first occurrence of key, or None if absent."""
    return next((index for index, value in enumerate(values) if value == key), None)


def binary_search(values: Sequence[int], key: int) -> Optional[int]:
    """Return an index of key in an ascending sequence, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def recursive_linear_search(values: Sequence[int], key: int) -> Optional[int]:
    """Search inward from both ends at once; return the index found, or None."""

    def search(low: int, high: int) -> Optional[int]:
        if low > high:
            return None
        if values[low] == key:
            return low
        if values[high] == key:
            return high
        return search(low + 1, high - 1)

    return search(0, len(values) - 1)