"""String checks."""

from __future__ import annotations

from collections import Counter


def is_lapindrome(text: str) -> bool:
    """Tell whether both halves of ``text`` hold the same characters.

    For an odd length the middle character belongs to neither half.
    """
    half = len(text) // 2
    return Counter(text[:half]) == Counter(text[len(text) - half :])