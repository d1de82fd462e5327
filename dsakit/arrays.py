"""Array helpers: deletion, frequencies, merging, de-duplication, reversal."""

from __future__ import annotations

from collections import Counter
from itertools import chain, groupby
from typing import Any, Dict, Iterable, List, Optional, Sequence

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1


def delete_element(values: Sequence[Any], x: Any) -> List[Any]:
    """Return the values without the last occurrence of ``x``."""
    items = list(values)
    for index in range(len(items) - 1, -1, -1):
        if items[index] == x:
            del items[index]
            return items
    raise ValueError(f"{x!r} is not present in the array")


def frequencies(values: Iterable[Any]) -> Dict[Any, int]:
    """Map each value to how often it occurs, in order of first appearance."""
    return dict(Counter(values))


def merge_arrays(first: Iterable[Any], second: Iterable[Any]) -> List[Any]:
    """Return the elements of ``first`` followed by those of ``second``."""
    return list(chain(first, second))


def remove_duplicates(values: Iterable[Any]) -> List[Any]:
    """Collapse runs of equal neighbours to one element (meant for sorted input)."""
    return [key for key, _ in groupby(values)]


def reverse_array(
    values: Sequence[Any], start: int = 0, end: Optional[int] = None
) -> List[Any]:
    """Return a copy with the elements from ``start`` to ``end`` inclusive reversed.

    ``end`` defaults to the last index.
    """
    items = list(values)
    if end is None:
        end = len(items) - 1
    if start >= end:
        return items
    if start < 0 or end >= len(items):
        raise IndexError(f"range {start}..{end} is outside the array")
    items[start : end + 1] = items[start : end + 1][::-1]
    return items


def find_unique(values: Iterable[int], k: int) -> int:
    """Return the value that occurs once where every other value occurs ``k`` times.

    Works on 32-bit unsigned words by counting set bits per position.
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    words = list(values)
    for word in words:
        if not 0 <= word <= _WORD_MASK:
            raise ValueError(f"{word!r} is not a 32-bit unsigned value")
    result = 0
    for bit in range(_WORD_BITS):
        ones = sum(1 for word in words if word >> bit & 1)
        result += (ones % k) << bit
    return result & _WORD_MASK