"""A bounded last-in, first-out stack."""

from __future__ import annotations

from typing import Any


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class Stack:
    """A stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity}, items={self._items!r})"

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """Return True if the stack holds ``capacity`` values."""
        return len(self._items) == self.capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError(f"stack overflow: cannot push {value!r}")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow: cannot pop")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow: nothing to peek")
        return self._items[-1]