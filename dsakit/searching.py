"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], element: Any) -> int | None:
    """Return an index of ``element`` in the ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == element:
            return mid
        if items[mid] < element:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(items: Sequence[Any], element: Any) -> int | None:
    """Return the index of the first occurrence of ``element``, or None."""
    for index, item in enumerate(items):
        if item == element:
            return index
    return None