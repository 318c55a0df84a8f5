"""Numbers written as Roman numerals, Chinese numerals and hexadecimal text."""

from __future__ import annotations

from typing import Union

_ROMAN_ONES = ("", "i", "ii", "iii", "iv", "v", "vi", "vii", "viii", "ix")
_ROMAN_TENS = ("", "x", "xx", "xxx", "xl", "l", "lx", "lxx", "lxxx", "xc")
_ROMAN_HUNDREDS = ("", "c", "cc", "ccc", "cd", "d", "dc", "dcc", "dccc", "cm")
_ROMAN_THOUSANDS = ("", "m", "mm", "mmm")

# Index 0 is never used: a zero digit is spelled out by its position.
_HAN_DIGITS = ("?", "一", "二", "三", "四", "五", "六", "七", "八", "九")

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _check_int32(nr: int) -> None:
    if not _INT32_MIN <= nr <= _INT32_MAX:
        raise ValueError(f"{nr} does not fit in a signed 32-bit integer")


def to_roman(nr: int) -> str:
    """Lower-case Roman numeral; ``o`` for zero and ``?`` beyond 3999."""
    if nr == 0:
        return "o"
    if nr > 3999 or nr < -3999:
        return "?"
    if nr < 0:
        return "-" + to_roman(-nr)
    return (
        _ROMAN_THOUSANDS[(nr // 1000) % 10]
        + _ROMAN_HUNDREDS[(nr // 100) % 10]
        + _ROMAN_TENS[(nr // 10) % 10]
        + _ROMAN_ONES[nr % 10]
    )


def to_upper_roman(nr: int) -> str:
    """Upper-case Roman numeral."""
    return to_roman(nr).upper()


def _hanzi_group(nr: int, leading_zero: bool) -> str:
    """Spell a group of four decimal digits.

    With ``leading_zero`` a group that lacks its thousands digit is
    preceded by 零, as it is when it follows a higher group.
    """
    thousand = (nr % 10000) // 1000
    hundred = (nr % 1000) // 100
    ten = (nr % 100) // 10
    one = nr % 10
    if not (thousand or hundred or ten or one):
        return ""

    def tens() -> str:
        if ten:
            return _HAN_DIGITS[ten] + "十" + (_HAN_DIGITS[one] if one else "")
        return "零" + _HAN_DIGITS[one] if one else ""

    if thousand:
        head = _HAN_DIGITS[thousand] + "千"
        if hundred:
            return head + _HAN_DIGITS[hundred] + "百" + tens()
        if ten:
            return head + "零" + tens()
        return head + tens()

    prefix = "零" if leading_zero else ""
    if hundred:
        return prefix + _HAN_DIGITS[hundred] + "百" + tens()
    if ten:
        if ten == 1 and not leading_zero:
            return "十" + (_HAN_DIGITS[one] if one else "")
        return prefix + tens()
    return prefix + _HAN_DIGITS[one]


def to_hanzi(nr: int) -> str:
    """Chinese numeral for a signed 32-bit integer."""
    _check_int32(nr)
    if nr == 0:
        return "零"
    if nr < 0:
        return "负" + to_hanzi_positive(-nr)
    return to_hanzi_positive(nr)


def to_hanzi_positive(nr: int) -> str:
    """Chinese numeral for a positive integer below 2**31 + 1."""
    if nr >= 100000000:
        return (
            _hanzi_group(nr // 100000000, False)
            + "亿"
            + _hanzi_group((nr // 10000) % 10000, True)
            + "万"
            + _hanzi_group(nr % 10000, True)
        )
    if nr >= 10000:
        return _hanzi_group(nr // 10000, False) + "万" + _hanzi_group(nr % 10000, True)
    return _hanzi_group(nr, False)


def _check_byte(i: int) -> None:
    if not 0 <= i <= 0xFF:
        raise ValueError(f"{i} is not an 8-bit unsigned integer")


def to_padded_upper_hex(i: int) -> str:
    """Two upper-case hexadecimal digits for a byte value."""
    _check_byte(i)
    return format(i, "02X")


def to_padded_hex(i: int) -> str:
    """Two lower-case hexadecimal digits for a byte value."""
    return to_padded_upper_hex(i).lower()


def to_upper_hex(i: int) -> str:
    """Upper-case hexadecimal text of an integer, with a leading ``-`` if negative."""
    if i < 0:
        return "-" + format(-i, "X")
    return format(i, "X")


def to_hex(i: int) -> str:
    """Lower-case hexadecimal text of an integer, with a leading ``-`` if negative."""
    return to_upper_hex(i).lower()


def _hex_digit(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    return 0


def from_hex(s: str) -> int:
    """Parse hexadecimal text into a signed 32-bit integer.

    A leading ``-`` negates the result; any character that is not a
    hexadecimal digit counts as a zero digit. Overflow wraps around.
    """
    if s.startswith("-"):
        return _to_int32(-from_hex(s[1:]))
    result = 0
    for ch in s:
        result = ((result << 4) + _hex_digit(ch)) & 0xFFFFFFFF
    return _to_int32(result)


def as_hexadecimal(i: int, length: int) -> str:
    """Exactly ``length`` upper-case hexadecimal digits (1 to 16) of ``i``
    taken as an unsigned 32-bit value; longer results are zero-padded and
    shorter ones keep only the low digits."""
    if not 1 <= length <= 16:
        raise ValueError("len is too large")
    value = i & 0xFFFFFFFF
    return format(value, f"0{length}X")[-length:]


def uint32_to_upper_hex(i: int) -> str:
    """Upper-case hexadecimal text of an unsigned 32-bit integer."""
    if not 0 <= i <= 0xFFFFFFFF:
        raise ValueError(f"{i} is not a 32-bit unsigned integer")
    return format(i, "X")


def binary_to_hexadecimal(data: Union[bytes, bytearray, memoryview]) -> str:
    """Two upper-case hexadecimal digits for every byte of ``data``."""
    return bytes(data).hex().upper()