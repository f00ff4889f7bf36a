"""Fixed-capacity array helpers: positional insertion, deletion and ranking."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def delete_at(items: Sequence[T], index: int) -> list[T]:
    """Return a copy of ``items`` with the element at ``index`` removed.

    Later elements shift one place towards the front.
    """
    if not 0 <= index < len(items):
        raise IndexError(f"index {index} out of range for {len(items)} items")
    return [*items[:index], *items[index + 1:]]


def insert_at(items: Sequence[T], element: T, index: int, capacity: int) -> list[T]:
    """Return a copy of ``items`` with ``element`` placed at ``index``.

    Elements from ``index`` onwards shift one place towards the end.
    Raises OverflowError if ``items`` already holds ``capacity`` elements.
    """
    if len(items) >= capacity:
        raise OverflowError(
            f"cannot insert: {len(items)} items already fill capacity {capacity}"
        )
    if not 0 <= index <= len(items):
        raise IndexError(f"index {index} out of range for {len(items)} items")
    return [*items[:index], element, *items[index:]]


def second_largest(values: Iterable[int]) -> int:
    """Return the largest value strictly smaller than the maximum.

    Repeats of the maximum are ignored. Raises ValueError if there are
    fewer than two distinct values.
    """
    largest: int | None = None
    second: int | None = None
    for value in values:
        if largest is None or value > largest:
            second = largest
            largest = value
        elif value != largest and (second is None or value > second):
            second = value
    if second is None:
        raise ValueError("need at least two distinct values")
    return second