"""Labelled trees: atoms carrying a string, and compound nodes carrying an
integer operator and a list of children, each with an optional payload."""

from __future__ import annotations

import copy as _copy
import re
from typing import Any, Iterable, Iterator, List, Optional

_INT = re.compile(r"[+-]?\d+\Z")
_INT_PREFIX = re.compile(r"[+-]?\d+")
_DOUBLE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\Z")


class Tree:
    """A tree node.

    ``op == 0`` marks an atom holding ``label``; ``op > 0`` a compound node
    holding ``children``; ``op < 0`` a generic node. ``data`` is a free
    payload that takes no part in comparisons.
    """

    __slots__ = ("op", "label", "children", "data")
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        op: int = 0,
        label: str = "",
        children: Optional[Iterable["Tree"]] = None,
        data: Any = None,
    ) -> None:
        self.op = op
        self.label = label if op == 0 else ""
        self.children: List[Tree] = [] if op == 0 else list(children or [])
        self.data = data

    @classmethod
    def atom(cls, label: str = "") -> "Tree":
        """An atomic tree holding ``label``."""
        return cls(0, label)

    @classmethod
    def compound(cls, op: int, *args: "Tree") -> "Tree":
        """A compound tree with operator ``op`` and the given children."""
        if op == 0:
            raise ValueError("a compound tree cannot use 0 as operator")
        return cls(op, children=args)

    def is_atomic(self) -> bool:
        return self.op == 0

    def is_compound(self) -> bool:
        return self.op > 0

    def is_generic(self) -> bool:
        return self.op < 0

    def arity(self) -> int:
        """Number of children; 0 for an atom."""
        return 0 if self.op == 0 else len(self.children)

    def _require_compound(self) -> None:
        if self.op == 0:
            raise TypeError("atomic tree has no children")

    def __len__(self) -> int:
        self._require_compound()
        return len(self.children)

    def __getitem__(self, index: int) -> "Tree":
        self._require_compound()
        return self.children[index]

    def __setitem__(self, index: int, child: "Tree") -> None:
        self._require_compound()
        self.children[index] = child

    def __iter__(self) -> Iterator["Tree"]:
        return iter(self.children)

    def sub(self, start: int, end: int) -> "Tree":
        """A node with the same operator and the children ``start:end``."""
        self._require_compound()
        if not 0 <= start <= end <= len(self.children):
            raise IndexError("out of range")
        return Tree(self.op, children=self.children[start:end])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Tree):
            if self is other:
                return True
            if self.op != other.op:
                return False
            if self.op == 0:
                return self.label == other.label
            return self.children == other.children
        if isinstance(other, str):
            return self.op == 0 and self.label == other
        if isinstance(other, int) and not isinstance(other, bool):
            return self.op == other and self.arity() == 0
        return NotImplemented

    def __mul__(self, other: "Tree") -> "Tree":
        """Concatenate children; an atom is first wrapped in the other's operator."""
        if not isinstance(other, Tree):
            return NotImplemented
        left, right = self, other
        if left.is_atomic() and right.is_atomic():
            raise ValueError("cannot concatenate two atomic trees")
        if left.is_atomic():
            left = Tree(right.op, children=[left])
        if right.is_atomic():
            right = Tree(left.op, children=[right])
        return Tree(left.op, children=left.children + right.children)

    def __str__(self) -> str:
        if self.is_atomic():
            return self.label
        if self.is_compound():
            if not self.children:
                return f"{self.op}()"
            return f"{self.op} (" + ", ".join(str(c) for c in self.children) + ")"
        return ""

    def __repr__(self) -> str:
        if self.is_atomic():
            return f"Tree.atom({self.label!r})"
        return f"Tree({self.op}, children={self.children!r})"

    def is_func(self, op: int, count: Optional[int] = None) -> bool:
        """Operator is ``op`` and there are ``count`` children (any nonzero
        number when ``count`` is None)."""
        if self.op != op:
            return False
        if count is None:
            return self.arity() != 0
        return self.arity() == count

    def is_bool(self) -> bool:
        return self.is_atomic() and self.label in ("true", "false")

    def is_int(self) -> bool:
        return self.is_atomic() and _INT.match(self.label) is not None

    def is_double(self) -> bool:
        return self.is_atomic() and _DOUBLE.match(self.label) is not None

    def as_bool(self) -> bool:
        return self.is_atomic() and self.label == "true"

    def as_int(self) -> int:
        """Leading integer of an atom's label; 0 if none or not an atom."""
        if not self.is_atomic():
            return 0
        match = _INT_PREFIX.match(self.label)
        return int(match.group()) if match else 0

    def as_double(self) -> float:
        if not self.is_atomic():
            return 0.0
        try:
            return float(self.label)
        except ValueError:
            return 0.0

    def to_string(self) -> str:
        return self.label if self.is_atomic() else ""

    def append(self, child: "Tree") -> "Tree":
        """Add ``child`` at the end, in place."""
        self._require_compound()
        self.children.append(child)
        return self

    def extend(self, children: Iterable["Tree"]) -> "Tree":
        """Add every tree of ``children`` at the end, in place."""
        self._require_compound()
        self.children.extend(list(children))
        return self

    def copy(self) -> "Tree":
        """A deep copy of the structure; payloads are shallow-copied."""
        if self.is_atomic():
            return Tree(0, self.label, data=_copy.copy(self.data))
        return Tree(
            self.op,
            children=[c.copy() for c in self.children],
            data=_copy.copy(self.data),
        )