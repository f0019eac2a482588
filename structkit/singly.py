"""Singly linked list built from chained nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A node that links forward to the next one."""

    value: int
    next: Node | None = field(default=None, repr=False)


def has_cycle(head: Node | None) -> bool:
    """Return True if following next links from head ever loops back."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


class SinglyLinkedList:
    """List reachable from its head node by following next links."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in reversed(list(values)):
            self.prepend(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: int) -> None:
        """Add a value after the last node."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def prepend(self, value: int) -> None:
        """Add a value before the head."""
        self.head = Node(value, next=self.head)

    def insert(self, position: int, value: int) -> None:
        """Insert value so that it ends up at the zero-based position.

        Valid positions run from 0 (the head) to len(self) (after the last
        node); anything else raises IndexError.
        """
        if position < 0:
            raise IndexError("invalid position")
        if position == 0:
            self.prepend(value)
            return
        before = self.head
        for _ in range(position - 1):
            if before is None:
                break
            before = before.next
        if before is None:
            raise IndexError("invalid position")
        before.next = Node(value, next=before.next)

    def delete_head(self) -> int:
        """Remove the head node and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        removed = self.head
        self.head = removed.next
        return removed.value

    def delete_tail(self) -> int:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        if self.head.next is None:
            return self.delete_head()
        before = self.head
        while before.next.next is not None:
            before = before.next
        removed = before.next
        before.next = None
        return removed.value

    def delete_at(self, index: int) -> int:
        """Remove the node at the zero-based index and return its value."""
        if index < 0:
            raise IndexError("invalid index")
        if index == 0:
            return self.delete_head()
        before = self.head
        for _ in range(index - 1):
            if before is None:
                break
            before = before.next
        if before is None or before.next is None:
            raise IndexError("invalid index")
        removed = before.next
        before.next = removed.next
        return removed.value

    def reverse(self) -> None:
        """Reverse the links in place so the last node becomes the head."""
        previous = None
        node = self.head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self.head = previous

    def sort(self) -> None:
        """Arrange the values in ascending order, keeping the nodes in place."""
        for node, value in zip(list(self._nodes()), sorted(self)):
            node.value = value

    def values_reversed(self) -> Iterator[int]:
        """Yield the values from the last node back to the head."""
        return reversed(list(self))

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"