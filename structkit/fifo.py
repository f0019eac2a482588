"""FIFO queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class Queue:
    """First-in, first-out container."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque = deque(values)

    def push(self, value) -> None:
        """Add a value at the back."""
        self._items.append(value)

    def pop(self):
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def front(self):
        """Return the front value without removing it."""
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        """Iterate from front to back."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"