"""A fixed-capacity bag of items that keeps insertion order until removal."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class ArrayBag(Generic[T]):
    """An unordered collection holding at most ``CAPACITY`` items.

    Removing an item moves the last item into the freed slot, so the
    order of the remaining items is not preserved.
    """

    CAPACITY = 100

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, entry: Any) -> bool:
        return self._index_of(entry) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def _matches(self, stored: T, entry: Any) -> bool:
        """Decide whether a stored item counts as ``entry``."""
        return stored is entry or stored == entry

    def _index_of(self, entry: Any) -> int | None:
        return next(
            (index for index, stored in enumerate(self._items) if self._matches(stored, entry)),
            None,
        )

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.CAPACITY

    def is_empty(self) -> bool:
        return not self._items

    def add(self, entry: T) -> bool:
        """Add ``entry``; return False if the bag is already full."""
        if self.is_full:
            return False
        self._items.append(entry)
        return True

    def remove(self, entry: Any) -> bool:
        """Remove one occurrence of ``entry``; return False if it is absent."""
        index = self._index_of(entry)
        if index is None:
            return False
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
        return True

    def clear(self) -> None:
        self._items.clear()

    def frequency_of(self, entry: Any) -> int:
        return sum(1 for stored in self._items if self._matches(stored, entry))

    def to_list(self) -> list[T]:
        return list(self._items)

    def __iadd__(self, other: Iterable[T]) -> "ArrayBag[T]":
        """Append every item of ``other``, duplicates included, until full."""
        for entry in list(other):
            if not self.add(entry):
                break
        return self

    def union_update(self, other: Iterable[T]) -> None:
        """Append items of ``other`` not already present, until full."""
        for entry in list(other):
            if self.is_full:
                break
            if entry not in self:
                self.add(entry)