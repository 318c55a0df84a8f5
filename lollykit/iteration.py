"""Cursors over containers with an explicit busy/next protocol."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

_EMPTY = object()


class Cursor(Generic[T]):
    """A forward cursor over an iterable.

    :meth:`busy` tells whether an element remains, :meth:`current` reads it
    without moving and :meth:`next` reads it and moves on.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._source = iter(iterable)
        self._pending: Any = _EMPTY

    def _fill(self) -> None:
        if self._pending is _EMPTY:
            self._pending = next(self._source, _EMPTY)

    def busy(self) -> bool:
        """Whether another element remains."""
        self._fill()
        return self._pending is not _EMPTY

    def current(self) -> T:
        """The element under the cursor, without moving."""
        if not self.busy():
            raise IndexError("end of iterator")
        return self._pending

    def next(self) -> T:
        """The element under the cursor; the cursor then moves on."""
        item = self.current()
        self._pending = _EMPTY
        return item

    def increase(self) -> None:
        """Move past the current element, if any."""
        self._fill()
        self._pending = _EMPTY

    def remains(self) -> int:
        """``-1`` when elements remain (count unknown), ``0`` at the end."""
        return -1 if self.busy() else 0

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.busy():
            raise StopIteration
        return self.next()


def iterate(container: Iterable[T]) -> Cursor[T]:
    """A cursor over the keys of a map or the items of a set."""
    return Cursor(container)


def format_iterator(cursor: Cursor[Any]) -> str:
    """Consume ``cursor`` and render its elements as ``[ a, b ]``."""
    return "[ " + ", ".join(str(item) for item in cursor) + " ]"