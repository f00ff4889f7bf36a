"""A singly linked list and a grade report built over linked records."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """One value in a singly linked list."""

    data: Any
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list with positional insertion and deletion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def node_at(self, index: int) -> Node:
        """Return the node at position ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for {self._size} nodes")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(index)

    def insert_first(self, value: Any) -> Node:
        """Put ``value`` before the head and return its node."""
        self.head = Node(value, self.head)
        self._size += 1
        return self.head

    def insert_at(self, index: int, value: Any) -> Node:
        """Put ``value`` at position ``index`` and return its node."""
        if index == 0:
            return self.insert_first(value)
        if not 0 < index <= self._size:
            raise IndexError(f"index {index} out of range for {self._size} nodes")
        return self.insert_after(self.node_at(index - 1), value)

    def append(self, value: Any) -> Node:
        """Put ``value`` after the last node and return its node."""
        if self.head is None:
            return self.insert_first(value)
        return self.insert_after(self.node_at(self._size - 1), value)

    def insert_after(self, node: Node, value: Any) -> Node:
        """Put ``value`` right after ``node``, which must be in this list."""
        if not any(member is node for member in self._nodes()):
            raise ValueError("node is not in this list")
        new_node = Node(value, node.next)
        node.next = new_node
        self._size += 1
        return new_node

    def delete_first(self) -> Any:
        """Remove the head and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        value = self.head.data
        self.head = self.head.next
        self._size -= 1
        return value

    def delete_last(self) -> Any:
        """Remove the last node and return its value."""
        if self._size <= 1:
            return self.delete_first()
        second_last = self.node_at(self._size - 2)
        value = second_last.next.data
        second_last.next = None
        self._size -= 1
        return value

    def delete_at(self, index: int) -> Any:
        """Remove the node at position ``index`` and return its value."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for {self._size} nodes")
        if index == 0:
            return self.delete_first()
        previous = self.node_at(index - 1)
        removed = previous.next
        previous.next = removed.next
        self._size -= 1
        return removed.data

    def delete_value(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if none."""
        previous: Node | None = None
        for node in self._nodes():
            if node.data == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return
            previous = node
        raise ValueError(f"{value!r} not in list")


@dataclass(frozen=True)
class GradeReport:
    """Students holding an A or B grade, in the order they were read."""

    grades: tuple[tuple[str, str], ...]

    @property
    def a_count(self) -> int:
        return sum(1 for _, grade in self.grades if grade == "A")

    @property
    def b_count(self) -> int:
        return sum(1 for _, grade in self.grades if grade == "B")

    def __str__(self) -> str:
        lines = [f"{name} has {grade} grade" for name, grade in self.grades]
        lines.append(f"Total A grade: {self.a_count}")
        lines.append(f"Total B grade: {self.b_count}")
        return "\n".join(lines)


def grade_report(records: Iterable[tuple[str, int]]) -> GradeReport:
    """Grade ``(name, mark)`` records: A from 85 up, B above 70 and below 85."""
    grades: list[tuple[str, str]] = []
    for name, mark in records:
        if mark >= 85:
            grades.append((name, "A"))
        elif mark > 70:
            grades.append((name, "B"))
    return GradeReport(tuple(grades))