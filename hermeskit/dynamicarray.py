"""A growable sequence that tracks an explicit capacity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

GROWTH_FACTOR = 2.0


class DynamicArray(Generic[T]):
    """Ordered storage whose capacity doubles whenever it fills up.

    The capacity is always kept strictly greater than the length, so that
    one free slot remains after every operation that grows the array.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[T] = []
        self._capacity = int(capacity)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def grow(self) -> None:
        """Multiply the capacity by the growth factor."""
        # An empty reservation would never grow by multiplication alone.
        self._capacity = max(int(GROWTH_FACTOR * self._capacity), 1)

    def shrink(self) -> None:
        """Reduce the capacity to one more than the current length."""
        self._capacity = len(self._items) + 1

    def _reserve(self, required: int) -> None:
        while self._capacity <= required:
            self.grow()

    def append(self, item: T) -> None:
        """Add one item at the end."""
        self.extend((item,))

    def extend(self, items: Iterable[T]) -> None:
        """Add every item of ``items`` at the end, in order."""
        new_items = list(items)
        self._reserve(len(self._items) + len(new_items))
        self._items.extend(new_items)

    def concat(self, other: Iterable[T]) -> None:
        """Append the contents of another array (or any iterable)."""
        self.extend(other)

    def delete(self, index: int, count: int) -> None:
        """Remove ``count`` items starting at ``index``."""
        if index < 0 or count < 0 or index + count > len(self._items):
            raise IndexError("deleted range lies outside the array")
        del self._items[index : index + count]

    def insert(self, index: int, items: Iterable[T]) -> None:
        """Insert ``items`` before position ``index``."""
        if index < 0 or index > len(self._items):
            raise IndexError("insertion index lies outside the array")
        new_items = list(items)
        self._reserve(len(self._items) + len(new_items))
        self._items[index:index] = new_items

    def replace(self, index: int, items: Iterable[T]) -> None:
        """Overwrite items from ``index`` onwards, extending the array if needed."""
        if index < 0 or index > len(self._items):
            raise IndexError("replacement index lies outside the array")
        new_items = list(items)
        end = index + len(new_items)
        self._reserve(end)
        self._items[index:end] = new_items

    def clear(self) -> None:
        """Remove every item, keeping the capacity."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)