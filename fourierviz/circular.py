"""Fixed-capacity ring buffer that overwrites its oldest item."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class CircularBuffer(Generic[T]):
    """Holds at most ``capacity`` items, ordered from oldest to newest."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("Capacity must be greater than 0")
        self._capacity = capacity
        self._items: list[T] = []
        self._head = 0

    def push(self, item: T) -> None:
        """Append an item, replacing the oldest one when full."""
        if len(self._items) < self._capacity:
            self._items.append(item)
        else:
            self._items[self._head] = item
        self._head = (self._head + 1) % self._capacity

    def get(self, index: int) -> T | None:
        """Return the item at ``index`` counted from the oldest, or None."""
        if index < 0 or index >= len(self._items):
            return None
        if self.is_full():
            return self._items[(self._head + index) % self._capacity]
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        for index in range(len(self._items)):
            yield self.get(index)  # type: ignore[misc]

    def __reversed__(self) -> Iterator[T]:
        for index in range(len(self._items) - 1, -1, -1):
            yield self.get(index)  # type: ignore[misc]

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity