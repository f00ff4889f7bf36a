"""Queues: a linear bounded queue, a bounded deque and an unbounded linked queue."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no room."""


class QueueEmptyError(IndexError):
    """Raised when removing from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class Queue:
    """A linear first-in, first-out queue over ``capacity`` slots.

    Each enqueue takes the next slot; slots freed by dequeue are not reused,
    so the queue is full once ``capacity`` values have been enqueued.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __repr__(self) -> str:
        return f"Queue(capacity={self.capacity}, items={list(self)!r})"

    def is_empty(self) -> bool:
        """Return True if no value is waiting."""
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        """Return True if every slot has been used."""
        return len(self._slots) == self.capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        if self.is_full():
            raise QueueFullError(f"queue overflow: cannot enqueue {value!r}")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue underflow: nothing to dequeue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front += 1
        return value


class Deque:
    """A double-ended queue over ``capacity`` slots.

    Values are pushed at the back into fresh slots; pushing at the front
    only fills slots already freed there by ``pop_front``.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def __len__(self) -> int:
        return self._rear - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front + 1:self._rear + 1])

    def __repr__(self) -> str:
        return f"Deque(capacity={self.capacity}, items={list(self)!r})"

    def is_empty(self) -> bool:
        """Return True if no value is held."""
        return self._front == self._rear

    def is_full(self) -> bool:
        """Return True if there is no slot left at the back."""
        return self._rear == self.capacity - 1

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front, into a slot freed earlier."""
        if self._front < 0:
            raise QueueFullError(f"no free slot at the front for {value!r}")
        self._slots[self._front] = value
        self._front -= 1

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the back."""
        if self.is_full():
            raise QueueFullError(f"deque is full: cannot add {value!r}")
        self._rear += 1
        self._slots[self._rear] = value

    def pop_front(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("pop_front from empty deque")
        self._front += 1
        value = self._slots[self._front]
        self._slots[self._front] = None
        return value

    def pop_back(self) -> Any:
        """Remove and return the value at the back."""
        if self.is_empty():
            raise QueueEmptyError("pop_back from empty deque")
        value = self._slots[self._rear]
        self._slots[self._rear] = None
        self._rear -= 1
        return value


@dataclass(eq=False)
class _Link:
    data: Any
    next: _Link | None = field(default=None, repr=False)


class LinkedQueue:
    """An unbounded first-in, first-out queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: _Link | None = None
        self._rear: _Link | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True if no value is waiting."""
        return self._front is None

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        node = _Link(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise QueueEmptyError("dequeue from empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data