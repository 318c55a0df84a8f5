"""Hash sets with subset ordering."""

from __future__ import annotations

from typing import Dict, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class HashSet(Generic[T]):
    """A set of hashable items.

    ``a <= b`` holds when every item of ``a`` is in ``b``. ``a < b`` holds
    when that is so and ``a`` has fewer items. ``a == b`` holds when both
    sets have the same items.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: Dict[T, None] = {}
        if items is not None:
            for item in items:
                self.insert(item)

    def insert(self, item: T) -> "HashSet[T]":
        """Add ``item`` unless it is already present."""
        self._items.setdefault(item, None)
        return self

    def remove(self, item: T) -> None:
        """Remove ``item`` if present."""
        self._items.pop(item, None)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __le__(self, other: "HashSet[T]") -> bool:
        if not isinstance(other, HashSet):
            return NotImplemented
        if len(self) > len(other):
            return False
        return all(item in other for item in self._items)

    def __lt__(self, other: "HashSet[T]") -> bool:
        if not isinstance(other, HashSet):
            return NotImplemented
        return len(self) < len(other) and self <= other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashSet):
            return NotImplemented
        return len(self) == len(other) and self <= other

    def __str__(self) -> str:
        return "{ " + ", ".join(str(item) for item in self._items) + " }"

    def __repr__(self) -> str:
        return f"HashSet({list(self._items)!r})"

    def copy(self) -> "HashSet[T]":
        return HashSet(self._items)