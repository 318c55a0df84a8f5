"""Helpers for fixed-size sequences: capacity rounding, formatting, hashing,
slicing and element-wise scaling."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Sequence, TypeVar

T = TypeVar("T")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def round_length(n: int) -> int:
    """Storage capacity reserved for a sequence of ``n`` elements.

    Lengths below 6 are kept as they are; larger lengths are rounded up to a
    power of two, starting at 8.
    """
    if n < 6:
        return n
    capacity = 8
    while n > capacity:
        capacity <<= 1
    return capacity


def format_array(items: Iterable[Any]) -> str:
    """Render items as ``[ a, b, c ]``, or ``[ ]`` when there are none."""
    parts = [str(x) for x in items]
    if not parts:
        return "[ ]"
    return "[ " + ", ".join(parts) + " ]"


def array_hash(
    items: Iterable[T], item_hash: Callable[[T], int] = hash
) -> int:
    """Order-sensitive signed 32-bit hash of a sequence."""
    h = 0
    for item in items:
        h = _to_int32(_to_int32(item_hash(item)) ^ _to_int32((h << 7) + (h >> 25)))
    return h


def subarray(items: Sequence[T], start: int, end: int) -> List[T]:
    """The elements from ``start`` up to but not including ``end``."""
    if start < 0 or end > len(items) or end < start:
        raise IndexError("out of range")
    return list(items[start:end])


def scaled(items: Iterable[T], factor: T) -> List[T]:
    """A new list holding every element multiplied by ``factor``."""
    return [x * factor for x in items]


def _divide(x: Any, divisor: Any) -> Any:
    if isinstance(x, int) and isinstance(divisor, int):
        if divisor == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(x) // abs(divisor)
        return quotient if (x >= 0) == (divisor >= 0) else -quotient
    return x / divisor


def divided(items: Iterable[T], divisor: T) -> List[T]:
    """A new list holding every element divided by ``divisor``.

    Integers divided by integers are truncated toward zero.
    """
    return [_divide(x, divisor) for x in items]