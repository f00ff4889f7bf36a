"""Classic comparison sorts, each returning a new ascending list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeated adjacent swaps, stopping early once a pass swaps nothing."""
    result = list(values)
    end = len(result)
    while end > 1:
        swapped = False
        for i in range(end - 1):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        if not swapped:
            break
        end -= 1
    return result


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and key < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by swapping each later, smaller element into the current slot."""
    result = list(values)
    size = len(result)
    for i in range(size):
        for j in range(i + 1, size):
            if result[j] < result[i]:
                result[i], result[j] = result[j], result[i]
    return result


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low + 1, high
    while True:
        while i <= high and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first element of each range."""
    result = list(values)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _partition(result, low, high)
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return result