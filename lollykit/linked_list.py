"""Singly linked lists with prefix ordering and in-place appends."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


class _Node:
    __slots__ = ("item", "next")

    def __init__(self, item: Any, next_: Optional["_Node"] = None) -> None:
        self.item = item
        self.next = next_


class LinkedList(Generic[T]):
    """A singly linked list.

    Lists compare equal item by item; ``a < b`` holds when ``a`` is a proper
    prefix of ``b`` and ``a <= b`` when ``a`` is a prefix of ``b``.
    """

    __slots__ = ("_head",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args: T) -> None:
        self._head: Optional[_Node] = None
        for item in reversed(args):
            self._head = _Node(item, self._head)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return (node.item for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __getitem__(self, index: int) -> T:
        if not isinstance(index, int):
            raise TypeError("list indices must be integers")
        if index >= 0:
            item = next(islice(self, index, None), _MISSING)
            if item is not _MISSING:
                return item
        raise IndexError("list too short")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return all(
            a is not _MISSING and b is not _MISSING and a == b
            for a, b in zip_longest(self, other, fillvalue=_MISSING)
        )

    def __le__(self, other: "LinkedList[T]") -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        for a, b in zip_longest(self, other, fillvalue=_MISSING):
            if a is _MISSING:
                return True
            if b is _MISSING or not a == b:
                return False
        return True

    def __lt__(self, other: "LinkedList[T]") -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) < len(other) and self <= other

    def __add__(self, other: Any) -> "LinkedList[T]":
        """Concatenate with another list, or append a single item."""
        if isinstance(other, LinkedList):
            return LinkedList(*self, *other)
        return LinkedList(*self, other)

    def __contains__(self, item: object) -> bool:
        return any(x == item for x in self)

    def __str__(self) -> str:
        if self._head is None:
            return "[ ]"
        return "[ " + ", ".join(str(x) for x in self) + " ]"

    def __repr__(self) -> str:
        return f"LinkedList({', '.join(repr(x) for x in self)})"

    def _last_node(self) -> Optional[_Node]:
        last = None
        for last in self._nodes():
            pass
        return last

    def append(self, item: T) -> "LinkedList[T]":
        """Add ``item`` at the end, in place."""
        node = _Node(item)
        last = self._last_node()
        if last is None:
            self._head = node
        else:
            last.next = node
        return self

    def extend(self, other: Iterable[T]) -> "LinkedList[T]":
        """Add every item of ``other`` at the end, in place."""
        for item in list(other):
            self.append(item)
        return self

    def push_front(self, item: T) -> "LinkedList[T]":
        """Add ``item`` at the front, in place."""
        self._head = _Node(item, self._head)
        return self

    def pop_front(self) -> T:
        """Remove and return the first item."""
        if self._head is None:
            raise IndexError("pop from nil list")
        item = self._head.item
        self._head = self._head.next
        return item

    def is_nil(self) -> bool:
        return self._head is None

    def is_atom(self) -> bool:
        return self._head is not None and self._head.next is None

    def head(self, n: int = 1) -> "LinkedList[T]":
        """A new list holding the first ``n`` items."""
        if n == 0:
            return LinkedList()
        items = list(islice(self, max(n, 0)))
        if n < 0 or len(items) < n:
            raise IndexError("list too short to get the head")
        return LinkedList(*items)

    def tail(self, n: int = 1) -> "LinkedList[T]":
        """A new list holding all but the first ``n`` items."""
        node = self._head
        for _ in range(n):
            if node is None:
                raise IndexError("list too short to get the tail")
            node = node.next
        rest = LinkedList._from_node(node)
        return LinkedList(*rest)

    @classmethod
    def _from_node(cls, node: Optional[_Node]) -> "LinkedList[T]":
        result = cls.__new__(cls)
        result._head = node
        return result

    def last_item(self) -> T:
        last = self._last_node()
        if last is None:
            raise IndexError("last_item on nil list")
        return last.item

    def suppress_last(self) -> "LinkedList[T]":
        """Remove the last item, in place."""
        if self._head is None:
            raise IndexError("empty path")
        if self._head.next is None:
            self._head = None
            return self
        node = self._head
        while node.next.next is not None:
            node = node.next
        node.next = None
        return self

    def reversed(self) -> "LinkedList[T]":
        result: LinkedList[T] = LinkedList()
        for item in self:
            result.push_front(item)
        return result

    def remove(self, what: T) -> "LinkedList[T]":
        """A new list without any item equal to ``what``."""
        return LinkedList(*(x for x in self if not x == what))

    def copy(self) -> "LinkedList[T]":
        return LinkedList(*self)