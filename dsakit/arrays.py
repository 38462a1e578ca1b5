"""Simple array transformations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def doubled(values: Iterable[int]) -> list[int]:
    """Return every value multiplied by two."""
    return [value * 2 for value in values]


def alternate_ends(values: Sequence[int]) -> list[int]:
    """Interleave from both ends: first, last, second, second-last, and so on."""
    result: list[int] = []
    low, high = 0, len(values) - 1
    while low <= high:
        result.append(values[low])
        if low != high:
            result.append(values[high])
        low += 1
        high -= 1
    return result


def read_until_sentinel(values: Iterable[int], limit: int, sentinel: int = -1) -> list[int]:
    """Take at most limit values, stopping early at the sentinel."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    taken: list[int] = []
    for value in values:
        if value == sentinel or len(taken) == limit:
            break
        taken.append(value)
    return taken