"""Binary-search based lookups: integer square root and sorted search."""

from __future__ import annotations

from typing import Any, Sequence


def integer_sqrt(num: int) -> int:
    """Return the floor of the square root of ``num`` by binary search."""
    if num < 0:
        raise ValueError(f"square root of negative number {num}")
    if num <= 1:
        return num
    low, high = 1, num
    answer = 0
    while low <= high:
        mid = low + (high - low) // 2
        quotient = num // mid
        if mid == quotient:
            return mid
        if mid < quotient:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def binary_search(values: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the ascending sequence ``values``."""
    if not values:
        raise ValueError(f"{key!r} not found")
    low, high = 0, len(values) - 1
    while high - low > 1:
        mid = (low + high) // 2
        if values[mid] > key:
            high = mid
        else:
            low = mid
    if values[low] == key:
        return low
    if values[high] == key:
        return high
    raise ValueError(f"{key!r} not found")