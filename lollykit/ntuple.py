"""Small fixed-size tuples with a positional hash combination."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterable, Iterator


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def combine_hashes(hashes: Iterable[int]) -> int:
    """Fold hash values into one signed 32-bit hash, order sensitive."""
    values = iter(hashes)
    try:
        h = _to_int32(next(values))
    except StopIteration:
        raise ValueError("at least one hash value expected") from None
    for value in values:
        h = _to_int32((h << 11) ^ (h >> 21) ^ _to_int32(value))
    return h


def _items(self: Any) -> Iterator[Any]:
    return (getattr(self, f.name) for f in fields(self))


def _str(self: Any) -> str:
    return "[ " + ", ".join(str(x) for x in _items(self)) + " ]"


def _hash(self: Any) -> int:
    return combine_hashes(hash(x) for x in _items(self))


def _ntuple(cls: type) -> type:
    cls = dataclass(frozen=True)(cls)
    cls.__iter__ = _items
    cls.__str__ = _str
    cls.__hash__ = _hash
    return cls


@_ntuple
class Pair:
    x1: Any
    x2: Any


@_ntuple
class Triple:
    x1: Any
    x2: Any
    x3: Any


@_ntuple
class Quartet:
    x1: Any
    x2: Any
    x3: Any
    x4: Any


@_ntuple
class Quintuple:
    x1: Any
    x2: Any
    x3: Any
    x4: Any
    x5: Any


@_ntuple
class Sextuple:
    x1: Any
    x2: Any
    x3: Any
    x4: Any
    x5: Any
    x6: Any