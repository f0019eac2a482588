"""Doubly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class DoublyNode:
    """A node linked in both directions."""

    value: int
    next: DoublyNode | None = field(default=None, repr=False)
    prev: DoublyNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """List that can be walked forwards from head and backwards from tail."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add a value after the tail."""
        node = DoublyNode(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            node.prev = self.tail
            self.tail = node
        self._size += 1

    def prepend(self, value: int) -> None:
        """Add a value before the head."""
        node = DoublyNode(value)
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next = self.head
            self.head.prev = node
            self.head = node
        self._size += 1

    def insert(self, position: int, value: int) -> None:
        """Insert value so that it ends up at the zero-based position.

        Position 0 inserts at the head and position len(self) at the tail;
        anything outside that range raises IndexError.
        """
        if position < 0 or position > self._size:
            raise IndexError("invalid position")
        if position == self._size:
            self.append(value)
            return
        if position == 0:
            self.prepend(value)
            return
        before = self.head
        for _ in range(position - 1):
            before = before.next
        node = DoublyNode(value, next=before.next, prev=before)
        before.next.prev = node
        before.next = node
        self._size += 1

    def reverse(self) -> None:
        """Reverse the order of the values in place by swapping from both ends."""
        left, right = self.head, self.tail
        while left is not None and left is not right and left.prev is not right:
            left.value, right.value = right.value, left.value
            left, right = left.next, right.prev

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"