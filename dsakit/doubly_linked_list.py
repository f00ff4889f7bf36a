"""A doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """One value in a doubly linked list."""

    data: Any
    previous: DoublyNode | None = field(default=None, repr=False)
    next: DoublyNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A list whose nodes link to both neighbours."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.previous

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def insert_first(self, value: Any) -> DoublyNode:
        """Put ``value`` before the head and return its node."""
        node = DoublyNode(value, None, self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.previous = node
        self.head = node
        self._size += 1
        return node

    def append(self, value: Any) -> DoublyNode:
        """Put ``value`` after the tail and return its node."""
        if self.tail is None:
            return self.insert_first(value)
        node = DoublyNode(value, self.tail, None)
        self.tail.next = node
        self.tail = node
        self._size += 1
        return node

    def insert_at(self, index: int, value: Any) -> DoublyNode:
        """Put ``value`` at position ``index`` and return its node."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range for {self._size} nodes")
        if index == 0:
            return self.insert_first(value)
        if index == self._size:
            return self.append(value)
        previous = next(node for position, node in enumerate(self._nodes())
                        if position == index - 1)
        following = previous.next
        node = DoublyNode(value, previous, following)
        following.previous = node
        previous.next = node
        self._size += 1
        return node