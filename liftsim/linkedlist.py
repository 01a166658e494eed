"""Singly linked list of integers with front and rear insertion."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

__all__ = ["LinkedList"]


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: int, next_node: Optional["_Node"] = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList:
    """Singly linked list that keeps its head, tail and length."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.add_rear(value)

    def add_front(self, value: int) -> None:
        """Insert a value in the first position."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_rear(self, value: int) -> None:
        """Insert a value in the last position."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def delete(self, value: int) -> int:
        """Remove every occurrence of ``value``; return how many were removed."""
        kept = [item for item in self if item != value]
        removed = self._size - len(kept)
        self.clear()
        for item in kept:
            self.add_rear(item)
        return removed

    def copy(self) -> "LinkedList":
        """Return an independent list holding the same values in the same order."""
        return LinkedList(self)

    def clear(self) -> None:
        """Remove all values."""
        self._head = None
        self._tail = None
        self._size = 0

    def render(self) -> str:
        """Return the values as a line starting at the head."""
        return "Head -> " + " ".join(str(value) for value in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"