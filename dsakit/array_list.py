"""A bounded list that grows at the back and shrinks at either end."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class ArrayList:
    """A list that holds at most ``capacity`` values.

    Values are appended at the back and removed from the front or the back.
    Space freed at the front is reused by later appends.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ArrayList(capacity={self.capacity}, items={self._items!r})"

    def is_empty(self) -> bool:
        """Return True if the list holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """Return True if the list holds ``capacity`` values."""
        return len(self._items) == self.capacity

    def append(self, value: Any) -> None:
        """Add ``value`` at the back; raise OverflowError if the list is full."""
        if self.is_full():
            raise OverflowError(f"cannot add {value!r}: array list is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the value at the back."""
        if self.is_empty():
            raise IndexError("pop from empty array list")
        return self._items.pop()

    def pop_front(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise IndexError("pop_front from empty array list")
        return self._items.pop(0)