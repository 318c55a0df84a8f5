"""UTF-8 code point encoding and decoding, Unicode block names, and
UTF-8/UTF-16 conversion."""

from __future__ import annotations

import re
from typing import Iterator, Optional, Tuple, Union

_HEX_ESCAPE = re.compile(r"<#([^>]*)>?")

BytesLike = Union[bytes, bytearray, memoryview]


def encode_as_utf8(code: int) -> bytes:
    """UTF-8 bytes of ``code``; empty for values above 0x1FFFFF."""
    if code < 0:
        raise ValueError("code point must not be negative")
    if code <= 0x7F:
        return bytes([code])
    if code <= 0x7FF:
        return bytes([((code >> 6) & 0x1F) | 0xC0, (code & 0x3F) | 0x80])
    if code <= 0xFFFF:
        return bytes(
            [
                ((code >> 12) & 0x0F) | 0xE0,
                ((code >> 6) & 0x3F) | 0x80,
                (code & 0x3F) | 0x80,
            ]
        )
    if code <= 0x1FFFFF:
        return bytes(
            [
                ((code >> 18) & 0x07) | 0xF0,
                ((code >> 12) & 0x3F) | 0x80,
                ((code >> 6) & 0x3F) | 0x80,
                (code & 0x3F) | 0x80,
            ]
        )
    return b""


def decode_from_utf8(data: BytesLike, pos: int) -> Tuple[int, int]:
    """Decode the character starting at ``pos``.

    Returns the code point and the position just after it. A byte that
    does not start a valid sequence is returned as it is, one position on.
    """
    data = bytes(data)
    c = data[pos]
    if c & 0x80 == 0:
        return c, pos + 1
    if c & 0xE0 == 0xC0:
        trail, code = 1, c & 0x1F
    elif c & 0xF0 == 0xE0:
        trail, code = 2, c & 0x0F
    elif c & 0xF8 == 0xF0:
        trail, code = 3, c & 0x07
    else:
        return c, pos + 1
    i = pos
    for _ in range(trail):
        i = min(i + 1, len(data) - 1)
        b = data[i]
        if b & 0xC0 != 0x80:
            return c, pos + 1
        code = (code << 6) | (b & 0x3F)
    return code, i + 1


def unicode_get_range(code: int) -> str:
    """Name of the script or symbol block ``code`` belongs to, or ``""``."""
    if code <= 0x7F:
        return "ascii"
    if 0x80 <= code <= 0x37F:
        return "latin"
    if 0x370 <= code <= 0x3FF:
        return "greek"
    if 0x400 <= code <= 0x4FF:
        return "cyrillic"
    if 0x2460 <= code <= 0x24FF:
        return "enclosed_alphanumerics"
    if 0x3000 <= code <= 0x303F or 0x4E00 <= code <= 0x9FCC or 0xFF00 <= code <= 0xFFEF:
        return "cjk"
    if 0x3040 <= code <= 0x309F:
        return "hiragana"
    if 0xAC00 <= code <= 0xD7AF:
        return "hangul"
    if 0x2000 <= code <= 0x23FF:
        return "mathsymbols"
    if 0x2900 <= code <= 0x2E7F:
        return "mathextra"
    if 0x1D400 <= code <= 0x1D7FF:
        return "mathletters"
    return ""


def _hex_escapes(s: str) -> Iterator[Optional[str]]:
    """The hex payload of each ``<#...>`` escape, or None for any other char."""
    pos = 0
    while pos < len(s):
        match = _HEX_ESCAPE.match(s, pos)
        if match:
            yield match.group(1)
            pos = match.end()
        else:
            yield None
            pos += 1


def _is_cjk_escape(escape: Optional[str]) -> bool:
    return escape is not None and "4E00" <= escape <= "9FBF"


def is_cjk_unified_ideographs(s: str) -> bool:
    """Whether ``s`` consists only of ``<#XXXX>`` CJK unified ideographs."""
    return all(_is_cjk_escape(escape) for escape in _hex_escapes(s))


def has_cjk_unified_ideographs(s: str) -> bool:
    """Whether ``s`` holds at least one ``<#XXXX>`` CJK unified ideograph."""
    return any(_is_cjk_escape(escape) for escape in _hex_escapes(s))


def _valid_prefix(data: bytes, encoding: str) -> str:
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as error:
        return data[: error.start].decode(encoding)


def utf16_to_utf8(data: BytesLike) -> bytes:
    """Convert big-endian UTF-16 to UTF-8; conversion stops at the first
    invalid unit."""
    return _valid_prefix(bytes(data), "utf-16-be").encode("utf-8")


def utf8_to_utf16(data: Union[BytesLike, str]) -> bytes:
    """Convert UTF-8 to big-endian UTF-16.

    The input ends at its first NUL byte, and conversion stops at the
    first invalid sequence.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    raw = raw.split(b"\0", 1)[0]
    return _valid_prefix(raw, "utf-8").encode("utf-16-be")