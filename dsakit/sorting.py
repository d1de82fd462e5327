"""Sorting routines: bubble, bucket, quick, descending, letters and distinct."""

from __future__ import annotations

from collections import Counter
from itertools import chain, groupby
from string import ascii_lowercase
from typing import Any, Iterable, List


def bubble_sort(values: Iterable[Any]) -> List[Any]:
    """Return the values in ascending order, sorted by repeated swaps."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def bucket_sort(values: Iterable[float]) -> List[float]:
    """Return values from the range [0, 1) in ascending order.

    Each value goes to bucket ``int(n * value)`` of ``n`` buckets, the
    buckets are sorted one by one and then joined.
    """
    items = list(values)
    count = len(items)
    buckets: List[List[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(count * value)].append(value)
    return list(chain.from_iterable(sorted(bucket) for bucket in buckets))


def _partition(items: List[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> List[Any]:
    """Return the values in ascending order, sorted with Lomuto partitioning."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _partition(items, low, high)
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return items


def sort_descending(values: Iterable[Any]) -> List[Any]:
    """Return the values in descending order."""
    return sorted(values, reverse=True)


def sort_letters(text: str) -> str:
    """Return the lowercase letters of ``text`` in alphabetical order.

    Uses a count per letter; any character outside ``a``-``z`` is an error.
    """
    bad = [ch for ch in text if ch not in ascii_lowercase]
    if bad:
        raise ValueError(f"only lowercase letters can be sorted, got {bad[0]!r}")
    counts = Counter(text)
    return "".join(letter * counts[letter] for letter in ascii_lowercase)


def unique_numbers(values: Iterable[Any]) -> List[Any]:
    """Return each distinct value once, in ascending order."""
    return [key for key, _ in groupby(sorted(values))]