"""Parsing and formatting of integers and decimals."""

from __future__ import annotations

from wordlegui.charclass import is_digit, is_space

INT_MIN = -2147483648
INT_MAX = 2147483647
_INT_DIGITS = 10


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's complement integer of the given width."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def parse_long(text: str) -> int:
    """Read a leading integer from text, the way a C long is read.

    Leading whitespace is skipped, one optional sign is honoured and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around like a 64 bit integer.
    """
    position = 0
    while position < len(text) and is_space(text[position]):
        position += 1
    negative = False
    if position < len(text) and text[position] in "+-":
        negative = text[position] == "-"
        position += 1
    start = position
    while position < len(text) and is_digit(text[position]):
        position += 1
    digits = text[start:position]
    value = int(digits) if digits else 0
    return _wrap(-value if negative else value, 64)


def parse_int(text: str) -> int:
    """Read a leading integer from text and wrap it to a 32 bit integer."""
    return _wrap(parse_long(text), 32)


def parse_decimal(text: str) -> float:
    """Read a leading decimal number such as "-12.5" from text.

    Only a leading minus sign is recognised; reading stops at the first
    character that is neither a digit nor a dot. A later dot restarts the
    fractional place at tenths.
    """
    sign = 1.0
    rest = text
    if rest.startswith("-"):
        sign = -1.0
        rest = rest[1:]
    result = 0.0
    depth = 1
    for char in rest:
        if char == ".":
            depth = 10
            continue
        if not is_digit(char):
            break
        if depth == 1:
            result = result * 10 + int(char)
        else:
            result += int(char) / depth
            depth *= 10
    return result * sign


def exceeds_int(text: str) -> bool:
    """Tell whether the number written in text lies outside the int range.

    Leading zeros, after an optional minus sign, are ignored. Empty text is
    never out of range.
    """
    if not text:
        return False
    value = text
    if value.startswith("-0"):
        value = "-" + value[1:].lstrip("0")
    if value.startswith("0"):
        value = value.lstrip("0") or "0"
        if not value:
            value = "0"
    leading_digits = 0
    for char in value:
        if not is_digit(char):
            break
        leading_digits += 1
        if leading_digits > _INT_DIGITS:
            return True
    number = parse_long(value)
    return not INT_MIN <= number <= INT_MAX


def int_to_str(n: int) -> str:
    """Write an integer in decimal, with a leading minus sign if negative."""
    return str(n)


def int_length(n: int) -> int:
    """Number of characters needed to write n, the minus sign included."""
    return len(int_to_str(n))


def is_digit_string(text: str) -> bool:
    """Tell whether text holds only digits after an optional sign.

    A sign counts only when a digit follows it. Empty text holds only digits.
    """
    body = text
    if len(body) > 1 and body[0] in "+-" and is_digit(body[1]):
        body = body[1:]
    return all(is_digit(char) for char in body)


def average(a: int, b: int) -> int:
    """Average of two integers, rounded towards positive infinity."""
    return (a + b + 1) >> 1


def gap(a: int, b: int) -> int:
    """Distance between two integers on the number line."""
    return abs(a - b)