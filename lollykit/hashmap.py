"""Hash maps with a default value for missing keys, plus patch helpers."""

from __future__ import annotations

import copy as _copy
from typing import Dict, Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class HashMap(Generic[K, V]):
    """A mapping whose lookups of missing keys yield a default value.

    ``m[key]`` never inserts; :meth:`get_or_insert` stores a copy of the
    default for a missing key and returns the stored value.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, default: V = None) -> None:
        self.default = default
        self._entries: Dict[K, V] = {}

    def __getitem__(self, key: K) -> V:
        return self._entries.get(key, self.default)

    def __setitem__(self, key: K, value: V) -> None:
        self._entries[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        """Same size, and every entry of ``self`` is matched by ``other[key]``."""
        if not isinstance(other, HashMap):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(other[key] == value for key, value in self._entries.items())

    def __str__(self) -> str:
        body = ", ".join(f"{key}->{value}" for key, value in self._entries.items())
        return "{ " + body + " }"

    def __repr__(self) -> str:
        return f"HashMap(default={self.default!r}, entries={self._entries!r})"

    def get_or_insert(self, key: K) -> V:
        """Return the value for ``key``, first storing the default if absent."""
        if key not in self._entries:
            self._entries[key] = _copy.copy(self.default)
        return self._entries[key]

    def reset(self, key: K) -> None:
        """Remove ``key`` if present."""
        self._entries.pop(key, None)

    def is_empty(self) -> bool:
        return not self._entries

    def join(self, other: "HashMap[K, V]") -> None:
        """Store a copy of every entry of ``other`` into this map."""
        for key in list(other):
            self._entries[key] = _copy.copy(other[key])

    def write_back(self, key: K, base: "HashMap[K, V]") -> None:
        """If ``key`` is absent, store the value ``base`` gives for it."""
        if key in self._entries:
            return
        self._entries[key] = base[key]

    def pre_patch(self, patch: "HashMap[K, V]", base: "HashMap[K, V]") -> None:
        """For each key of ``patch``, keep the current value (or take the
        patch's) unless it equals ``base``'s, in which case drop the key."""
        for key in list(patch):
            value = self._entries[key] if key in self._entries else patch[key]
            if base[key] == value:
                self.reset(key)
            else:
                self._entries[key] = value

    def post_patch(self, patch: "HashMap[K, V]", base: "HashMap[K, V]") -> None:
        """Apply ``patch``, dropping keys whose value equals ``base``'s."""
        for key in list(patch):
            value = patch[key]
            if base[key] == value:
                self.reset(key)
            else:
                self._entries[key] = value

    def copy(self) -> "HashMap[K, V]":
        result: HashMap[K, V] = HashMap(self.default)
        result._entries = dict(self._entries)
        return result


def changes(patch: HashMap[K, V], base: HashMap[K, V]) -> HashMap[K, V]:
    """Entries of ``patch`` whose value differs from ``base``'s."""
    result: HashMap[K, V] = HashMap(base.default)
    for key in patch:
        if patch[key] != base[key]:
            result[key] = patch[key]
    return result


def invert(patch: HashMap[K, V], base: HashMap[K, V]) -> HashMap[K, V]:
    """For keys where ``patch`` differs from ``base``, the values of ``base``."""
    result: HashMap[K, V] = HashMap(base.default)
    for key in patch:
        if patch[key] != base[key]:
            result[key] = base[key]
    return result