"""A growable sequence whose elements are managed by a field description."""

from __future__ import annotations

import itertools
import operator
from typing import Any, Iterator

from polystring.fieldinfo import FieldInfo


class Collection:
    """An ordered sequence of elements of one kind.

    Every element is copied with the field description's ``copy`` when it is
    stored, so later changes to the original do not reach the collection.
    """

    def __init__(self, field: FieldInfo) -> None:
        if field is None:
            raise TypeError("a collection needs a field description")
        self.field = field
        self._items: list[Any] = []

    def _new_empty(self) -> Collection:
        return Collection(self.field)

    def append(self, element: Any) -> None:
        """Store a copy of ``element`` at the end."""
        if element is None:
            raise TypeError("cannot append None to a collection")
        self._items.append(self.field.copy(element))

    def __getitem__(self, index: int) -> Any:
        position = operator.index(index)
        if not 0 <= position < len(self._items):
            raise IndexError(
                f"index {position} out of range for collection of size {len(self._items)}"
            )
        return self._items[position]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def slice(self, start: int, end: int) -> Collection:
        """Return a new collection with the elements from ``start`` up to ``end``."""
        start = operator.index(start)
        end = operator.index(end)
        if start < 0 or start > end or end > len(self._items):
            raise ValueError(
                f"invalid range [{start}, {end}) for collection of size {len(self._items)}"
            )
        result = self._new_empty()
        for item in self._items[start:end]:
            result.append(item)
        return result

    def concat(self, other: Collection) -> Collection:
        """Return a new collection holding this one's elements followed by ``other``'s."""
        if other is None:
            raise TypeError("cannot concatenate with None")
        if self.field is not other.field:
            raise TypeError("cannot concatenate collections of different element types")
        result = self._new_empty()
        for item in itertools.chain(self, other):
            result.append(item)
        return result