"""A fixed-capacity, unordered bag of items."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class ArrayBag(Generic[T]):
    """An unordered collection with a fixed capacity that allows duplicates.

    Removing an item moves the last item into the freed slot, so iteration
    order is insertion order only until the first removal.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return self._index_of(item) >= 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"

    def _index_of(self, item: object) -> int:
        for index, current in enumerate(self._items):
            if current == item:
                return index
        return -1

    def add(self, item: T) -> bool:
        """Add ``item``; return False if the bag is already full."""
        if len(self._items) >= self._capacity:
            return False
        self._items.append(item)
        return True

    def remove(self, item: T) -> bool:
        """Remove one occurrence of ``item``; return False if it is absent."""
        index = self._index_of(item)
        if index < 0:
            return False
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
        return True

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def frequency_of(self, item: T) -> int:
        """Return how many times ``item`` occurs in the bag."""
        return sum(1 for current in self._items if current == item)

    def _has_room_for(self, other: ArrayBag[T]) -> bool:
        return len(self) + len(other) < self._capacity

    def __iadd__(self, other: ArrayBag[T]) -> ArrayBag[T]:
        """Add every item of ``other``, duplicates included.

        Nothing is added unless both bags together stay below capacity.
        """
        if self._has_room_for(other):
            for item in list(other._items):
                self.add(item)
        return self

    def __itruediv__(self, other: ArrayBag[T]) -> ArrayBag[T]:
        """Add the items of ``other`` that this bag does not yet hold.

        Nothing is added unless both bags together stay below capacity.
        """
        if self._has_room_for(other):
            for item in list(other._items):
                if item not in self:
                    self.add(item)
        return self