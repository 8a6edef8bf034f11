# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""A UniqueList is a list that refuses duplicates, keeping each value at the position of its first
insertion.

It is how classpaths and artifact lists are assembled from overlapping dependency subtrees: a value
met again deeper in the graph neither moves nor replaces the entry already placed.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Iterator, Sequence, TypeVar, overload

T = TypeVar("T", bound=Hashable)


class UniqueList(Sequence[T]):
    """An append-only sequence with set semantics on insertion.

    This is not thread safe: a single owner should populate it before handing it off read-only.
    """

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        # NB: Dictionaries are ordered in Python 3.7+, and re-assigning an existing key does not
        # move it, which gives first-insertion-wins for free.
        self._items: dict[T, None] = {}
        # A parallel list gives O(1) indexed access.
        self._order: list[T] = []
        if iterable is not None:
            self.extend(iterable)

    def add(self, value: T) -> bool:
        """Append `value` unless an equal value is already present.

        :returns: True if the value was appended, False if it was already present.
        """
        if value in self._items:
            return False
        self._items[value] = None
        self._order.append(value)
        return True

    def extend(self, values: Iterable[T]) -> int:
        """Add each of `values` in turn, returning how many were actually appended."""
        return sum(1 for value in values if self.add(value))

    def get(self, index: int) -> T:
        """Return the value at `index`.

        Unlike list indexing, negative indices are not supported.

        :raises: IndexError if index is not within [0, size).
        """
        if not 0 <= index < len(self._order):
            raise IndexError(
                f"Index {index} out of range for {self.__class__.__name__} of size {self.size()}"
            )
        return self._order[index]

    def size(self) -> int:
        return len(self._order)

    @overload
    def __getitem__(self, index: int) -> T:
        ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[T]:
        ...

    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        if isinstance(index, slice):
            return self.__class__(self._order[index])
        return self.get(index)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, value: Any) -> bool:
        try:
            return value in self._items
        except TypeError:
            # Unhashable values can never have been added.
            return False

    def __iter__(self) -> Iterator[T]:
        return iter(self._order)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._order)

    def __eq__(self, other: Any) -> bool:
        """Returns True if other is a UniqueList with the same elements in the same order."""
        if not isinstance(other, UniqueList):
            return NotImplemented
        return self._order == other._order

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        name = self.__class__.__name__
        if not self._order:
            return f"{name}()"
        return f"{name}({self._order!r})"
