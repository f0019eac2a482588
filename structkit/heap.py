"""Binary max-heap and min-heap stored in a flat list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator


def _swap(items: list[int], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def _sift_up(items: list[int], should_swap: Callable[[int, int], bool]) -> None:
    """Move the last item up while ``should_swap(parent, child)`` holds."""
    current = len(items) - 1
    while current != 0:
        parent = (current - 1) // 2
        if not should_swap(items[parent], items[current]):
            break
        _swap(items, parent, current)
        current = parent


def _sift_down_max(items: list[int], index: int) -> None:
    while True:
        left = index * 2 + 1
        right = left + 1
        last = len(items) - 1
        if right <= last:
            if items[left] >= items[right] and items[left] >= items[index]:
                _swap(items, left, index)
                index = left
            elif items[left] <= items[right] and items[right] >= items[index]:
                _swap(items, right, index)
                index = right
            else:
                break
        elif left <= last:
            if items[left] >= items[index]:
                _swap(items, left, index)
                index = left
            else:
                break
        else:
            break


def _sift_down_min(items: list[int], index: int) -> None:
    while True:
        left = index * 2 + 1
        right = left + 1
        last = len(items) - 1
        if right <= last:
            if items[left] <= items[right] and items[left] < items[index]:
                _swap(items, left, index)
                index = left
            elif items[left] >= items[right] and items[right] < items[index]:
                _swap(items, right, index)
                index = right
            else:
                break
        elif left <= last:
            if items[left] <= items[index]:
                _swap(items, left, index)
                index = left
            else:
                break
        else:
            break


def _take_root(items: list[int], sift_down: Callable[[list[int], int], None]) -> int:
    if not items:
        raise IndexError("pop from empty heap")
    root = items[0]
    items[0] = items[-1]
    items.pop()
    sift_down(items, 0)
    return root


def _root(items: list[int]) -> int:
    if not items:
        raise IndexError("peek at empty heap")
    return items[0]


class MaxHeap:
    """Heap whose root is its largest value."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Add a value and restore the heap order."""
        self._items.append(value)
        _sift_up(self._items, lambda parent, child: parent < child)

    def pop(self) -> int:
        """Remove and return the largest value."""
        return _take_root(self._items, _sift_down_max)

    def peek(self) -> int:
        """Return the largest value without removing it."""
        return _root(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the values in storage (level) order."""
        return iter(list(self._items))

    def to_list(self) -> list[int]:
        """Return a copy of the underlying array."""
        return list(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class MinHeap:
    """Heap whose root is its smallest value."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Add a value and restore the heap order."""
        self._items.append(value)
        _sift_up(self._items, lambda parent, child: parent > child)

    def pop(self) -> int:
        """Remove and return the smallest value."""
        return _take_root(self._items, _sift_down_min)

    def peek(self) -> int:
        """Return the smallest value without removing it."""
        return _root(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the values in storage (level) order."""
        return iter(list(self._items))

    def to_list(self) -> list[int]:
        """Return a copy of the underlying array."""
        return list(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"