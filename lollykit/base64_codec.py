"""Base64 encoding with a line break every 80 output characters, and a
lenient decoder."""

from __future__ import annotations

import base64
from typing import List, Union

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_VALUES = {ch: i for i, ch in enumerate(_ALPHABET)}

# Every 60 input bytes form one output line of 80 characters.
_LINE_BYTES = 60


def encode_base64(data: Union[bytes, bytearray, memoryview]) -> str:
    """Encode bytes, padding with ``=`` and breaking lines with ``\\n``."""
    raw = bytes(data)
    return "\n".join(
        base64.b64encode(raw[i : i + _LINE_BYTES]).decode("ascii")
        for i in range(0, len(raw), _LINE_BYTES)
    )


def _decode_group(values: List[int]) -> bytes:
    count = len(values)
    if count <= 1:
        return b""
    padded = values + [0] * (4 - count)
    word = (padded[0] << 18) | (padded[1] << 12) | (padded[2] << 6) | padded[3]
    return word.to_bytes(3, "big")[: count - 1]


def decode_base64(text: Union[str, bytes]) -> bytes:
    """Decode base64 text.

    Characters outside the alphabet are skipped, decoding stops at the first
    ``=``, and an unterminated trailing group shorter than four characters is
    dropped.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    out = bytearray()
    group: List[int] = []
    for ch in text:
        value = _VALUES.get(ch)
        if value is not None:
            group.append(value)
            if len(group) == 4:
                out += _decode_group(group)
                group = []
        elif ch == "=":
            out += _decode_group(group)
            break
    return bytes(out)