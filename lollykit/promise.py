"""Deferred computations evaluated on demand."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Promise(ABC, Generic[T]):
    """A computation whose value is produced by :meth:`eval` when called.

    Promises compare equal only to themselves.
    """

    @abstractmethod
    def eval(self) -> T:
        """Compute and return the value."""

    def __call__(self) -> T:
        return self.eval()

    def __str__(self) -> str:
        return "promise"


def format_promise(promise: Optional[Promise]) -> str:
    """Describe a promise, or ``(null)`` when there is none."""
    if promise is None:
        return "(null)"
    return str(promise)