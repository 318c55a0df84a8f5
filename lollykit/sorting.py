"""Stable merge sort driven by a less-or-equal predicate."""

from __future__ import annotations

import operator
from typing import Any, Callable, List, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Leq = Callable[[Any, Any], bool]


def _order(keys: Sequence[T], leq: Optional[Leq]) -> List[int]:
    """Indices of ``keys`` in stably sorted order."""
    less_eq = leq if leq is not None else operator.le

    def sort(indices: List[int]) -> List[int]:
        if len(indices) <= 1:
            return indices
        if len(indices) == 2:
            first, second = indices
            if less_eq(keys[first], keys[second]):
                return indices
            return [second, first]
        middle = len(indices) // 2
        left = sort(indices[:middle])
        right = sort(indices[middle:])
        merged: List[int] = []
        i = j = 0
        while i < len(left) and j < len(right):
            if less_eq(keys[left[i]], keys[right[j]]):
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged

    return sort(list(range(len(keys))))


def merge_sort(items: MutableSequence[T], leq: Optional[Leq] = None) -> None:
    """Sort ``items`` in place; equal elements keep their order."""
    order = _order(items, leq)
    items[:] = [items[i] for i in order]


def merge_sort_pair(
    keys: MutableSequence[T], values: MutableSequence[U], leq: Optional[Leq] = None
) -> None:
    """Sort ``keys`` in place and reorder ``values`` the same way."""
    if len(keys) != len(values):
        raise ValueError("sequences of the same length expected")
    order = _order(keys, leq)
    keys[:] = [keys[i] for i in order]
    values[:] = [values[i] for i in order]


def sort_permutation(items: MutableSequence[T], leq: Optional[Leq] = None) -> List[int]:
    """Sort ``items`` in place and return the original index of each slot."""
    permutation = list(range(len(items)))
    merge_sort_pair(items, permutation, leq)
    return permutation


def permute(items: Sequence[T], permutation: Sequence[int]) -> List[T]:
    """A new list whose element ``i`` is ``items[permutation[i]]``."""
    if len(items) != len(permutation):
        raise ValueError("sequences of the same length expected")
    return [items[p] for p in permutation]