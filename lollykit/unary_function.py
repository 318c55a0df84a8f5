"""Unary function objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
S = TypeVar("S")


class UnaryFunction(ABC, Generic[T, S]):
    """A callable of one argument whose work is done by :meth:`eval`.

    Function objects compare equal only to themselves.
    """

    @abstractmethod
    def eval(self, arg: S) -> T:
        """Compute the result for ``arg``."""

    def __call__(self, arg: S) -> T:
        return self.eval(arg)