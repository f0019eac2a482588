"""LIFO stack and bracket-balance checking."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


class Stack:
    """Last-in, first-out container."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list = list(values)

    def push(self, value) -> None:
        """Put a value on top."""
        self._items.append(value)

    def pop(self):
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self):
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(list(self._items))

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


def is_valid_parentheses(text: str) -> bool:
    """Return True if every bracket in text is closed by its match in order.

    Any character that is not an opening bracket is treated as a closer, so
    characters other than brackets make the text invalid.
    """
    stack = Stack()
    for char in text:
        if char in _OPENERS:
            stack.push(char)
        elif stack.is_empty() or _PAIRS.get(char) != stack.peek():
            return False
        else:
            stack.pop()
    return stack.is_empty()