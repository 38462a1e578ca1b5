"""Comparison sorts and small sorting utilities over integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain

MAX_MERGED = 10000


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by repeated adjacent swaps."""
    items = list(values)
    n = len(items)
    for i in range(n):
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, selecting the minimum each pass."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, inserting each into a sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order using a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], left: int, right: int) -> int:
    pivot = items[right]
    i = left - 1
    for j in range(left, right):
        if items[j] <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[right] = items[right], items[i + 1]
    return i + 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order using quicksort with a last-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            pivot = _partition(items, left, right)
            pending.append((left, pivot - 1))
            pending.append((pivot + 1, right))
    return items


def _sift_down(items: list[int], size: int, i: int) -> None:
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == i:
            return
        items[i], items[largest] = items[largest], items[i]
        i = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order using an in-place binary max-heap."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, i)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def merge_descending(arrays: Iterable[Iterable[int]]) -> list[int]:
    """Combine several arrays into one list in descending order."""
    combined = list(chain.from_iterable(arrays))
    if len(combined) > MAX_MERGED:
        raise ValueError(f"at most {MAX_MERGED} values can be merged")
    return sorted(combined, reverse=True)


def sort_until_sentinel(values: Iterable[int], sentinel: int = -1) -> list[int]:
    """Sort the values that come before the first sentinel, leaving the sentinel out."""
    taken: list[int] = []
    for value in values:
        if value == sentinel:
            break
        taken.append(value)
    return sorted(taken)