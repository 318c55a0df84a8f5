"""Memoised functions."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from .hashmap import HashMap

T = TypeVar("T")
U = TypeVar("U")


class MemoFunction(Generic[T, U]):
    """Wraps a function of one argument and remembers every result."""

    def __init__(self, func: Callable[[T], U], default: U = None) -> None:
        self._func = func
        self._remember: HashMap[T, U] = HashMap(default)

    def __getitem__(self, x: T) -> U:
        if x in self._remember:
            return self._remember[x]
        y = self._func(x)
        self._remember[x] = y
        return y

    def __call__(self, x: T) -> U:
        return self[x]