"""Trees whose children are kept in a mapping keyed by edge label.

Such a tree stores dictionaries from key sequences to values: each edge
carries one key and a node may carry a label (the value reached by the
keys on the path from the root).
"""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterator, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class HashTree(Generic[K, V]):
    """A node with an optional label and children indexed by key."""

    __slots__ = ("label", "_children")

    def __init__(self, label: Optional[V] = None) -> None:
        self.label: Optional[V] = label
        self._children: Dict[K, "HashTree[K, V]"] = {}

    def contains(self, key: K) -> bool:
        """Whether this node has a child under ``key``."""
        return key in self._children

    def add_child(self, key: K, child: "HashTree[K, V]") -> None:
        """Attach ``child`` under ``key``, replacing any previous child."""
        if child is None:
            child = HashTree()
        self._children[key] = child

    def add_new_child(self, key: K) -> None:
        """Attach a fresh, unlabelled node under ``key``."""
        self.add_child(key, HashTree())

    def __getitem__(self, key: K) -> "HashTree[K, V]":
        """The child under ``key``; a missing child is an error."""
        try:
            return self._children[key]
        except KeyError:
            raise KeyError("read-access to non-existent node requested") from None

    def ensure(self, key: K) -> "HashTree[K, V]":
        """The child under ``key``, created unlabelled if it is missing.

        This may grow the tree but never changes the dictionary it stores.
        """
        if key not in self._children:
            self.add_new_child(key)
        return self._children[key]

    def __len__(self) -> int:
        return len(self._children)

    def keys(self) -> Iterator[K]:
        """The keys of the children."""
        return iter(self._children)

    def __repr__(self) -> str:
        return f"HashTree(label={self.label!r}, children={list(self._children)!r})"