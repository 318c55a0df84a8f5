"""Relative hash maps: a stack of hash maps where each layer overrides the
layers below it, for local changes that can be discarded or merged."""

from __future__ import annotations

import copy as _copy
from typing import Any, Generic, Optional, TypeVar

from .hashmap import HashMap

K = TypeVar("K")
V = TypeVar("V")

_RULE = "-" * 78


class RelativeHashMap(Generic[K, V]):
    """A hash map layered over an optional parent relative map.

    A key's value comes from the topmost layer that holds it; when no layer
    does, the top layer's default is used. ``item`` is either a
    :class:`HashMap` or the default value for a new, empty top layer.
    """

    def __init__(
        self, item: Any = None, parent: Optional["RelativeHashMap[K, V]"] = None
    ) -> None:
        self.item: HashMap[K, V] = item if isinstance(item, HashMap) else HashMap(item)
        self.parent = parent

    def __getitem__(self, key: K) -> V:
        if key in self.item or self.parent is None:
            return self.item[key]
        return self.parent[key]

    def __contains__(self, key: object) -> bool:
        if key in self.item:
            return True
        return self.parent is not None and key in self.parent

    def __str__(self) -> str:
        layers = []
        node: Optional[RelativeHashMap[K, V]] = self
        while node is not None:
            layers.append(str(node.item) + "\n")
            node = node.parent
        return (_RULE + "\n").join(layers)

    def get_or_insert(self, key: K) -> V:
        """The value of ``key`` stored in the top layer, copying it up from
        the parents or storing the default if the top layer lacks it."""
        if key in self.item:
            return self.item[key]
        if self.parent is not None and key in self.parent:
            self.item[key] = _copy.copy(self.parent[key])
        return self.item.get_or_insert(key)

    def extend(self) -> None:
        """Push a new, empty top layer."""
        self.parent = RelativeHashMap(self.item, self.parent)
        self.item = HashMap(self.item.default)

    def shorten(self) -> None:
        """Drop the top layer, discarding its changes."""
        if self.parent is None:
            raise ValueError("relative hashmap cannot be shortened")
        self.item = self.parent.item
        self.parent = self.parent.parent

    def merge(self) -> None:
        """Fold the top layer's changes into the layer below it."""
        if self.parent is None:
            raise ValueError("relative hashmap cannot be merged")
        self.parent.change(self.item)
        self.shorten()

    def find_changes(self, changes: HashMap[K, V]) -> None:
        """Drop from ``changes`` every entry that this map already holds."""
        same = [key for key in changes if self[key] == changes[key]]
        for key in same:
            changes.reset(key)

    def find_differences(self, changes: HashMap[K, V]) -> None:
        """Add to ``changes`` the parent's value of every top-layer key it
        lacks, then drop the entries this map already holds."""
        missing = [key for key in self.item if key not in changes]
        if missing and self.parent is None:
            raise ValueError("relative hashmap has no parent")
        for key in missing:
            changes[key] = self.parent[key]
        self.find_changes(changes)

    def change(self, changes: HashMap[K, V]) -> None:
        """Store every entry of ``changes`` in the top layer."""
        for key in changes:
            self.item[key] = changes[key]