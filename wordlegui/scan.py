"""Reading typed values out of a line of text by following a format.

In a format, ``%d`` reads an integer, ``%8`` an integer stored as one byte
and ``%f`` a decimal number. Any of them may be followed by ``[max]`` or
``[min,max]`` to bound the value. A character followed by ``*`` skips any
number of that character in the line, and followed by ``+`` requires at
least one. Every other character must appear as is; a newline in the format
also matches the end of the line.
"""

from __future__ import annotations

from dataclasses import dataclass

from wordlegui.charclass import is_digit
from wordlegui.numbers import INT_MAX, INT_MIN
from wordlegui.numbers import parse_decimal
from wordlegui.numbers import parse_int as _read_int

_END = "\0"
_TOKEN_ENDS = frozenset(" \n,\0")


class ScanError(ValueError):
    """A line does not match its format."""

    def __init__(self, message: str, line_number: int) -> None:
        super().__init__(message)
        self.line_number = line_number


@dataclass(frozen=True)
class Limits:
    """Inclusive bounds for a scanned value."""

    low: int
    high: int


def _at(text: str, index: int) -> str:
    """Character at index, or NUL past the end of text."""
    return text[index] if 0 <= index < len(text) else _END


def _range_error(line_number: int, low: str, high: str) -> ScanError:
    return ScanError(
        f"Value must be in range [{low}-{high}], line : '{line_number}'", line_number
    )


def _is_float_text(text: str) -> bool:
    i = 0
    if _at(text, i) in "+-":
        i += 1
    if _at(text, i) == "." and not is_digit(_at(text, i + 1)):
        return False
    while is_digit(_at(text, i)):
        i += 1
    if _at(text, i) == ".":
        i += 1
    while is_digit(_at(text, i)):
        i += 1
    return not text or _at(text, i) in (_END, " ", ",")


def _is_int_text(text: str) -> bool:
    i = 0
    if _at(text, i) in "+-":
        i += 1
    while is_digit(_at(text, i)):
        i += 1
    return _at(text, i) in _TOKEN_ENDS


def parse_float(text: str, line_number: int, limits: Limits) -> float:
    """Read a decimal number at the start of text and check its bounds."""
    if not _is_float_text(text):
        raise ScanError(f"Invalid float format on line : '{line_number}'", line_number)
    if text.startswith("+"):
        text = text[1:]
    result = parse_decimal(text)
    if result > limits.high or result < limits.low:
        raise _range_error(line_number, f"{limits.low}.0", f"{limits.high}.0")
    return result


def parse_int(text: str, line_number: int, limits: Limits) -> int:
    """Read an integer at the start of text and check its bounds."""
    if not _is_int_text(text):
        raise ScanError(f"Invalid integer on line : '{line_number}'", line_number)
    result = _read_int(text)
    if result > limits.high or result < limits.low:
        raise _range_error(line_number, str(limits.low), str(limits.high))
    return result


def _field_limits(type_char: str, after: str) -> Limits:
    """Bounds for a field, read from the text that follows its type char."""
    if not after.startswith("["):
        if type_char == "8":
            return Limits(0, 255)
        return Limits(INT_MIN, INT_MAX)
    body = after[1:]
    comma = body.find(",")
    close = body.find("]")
    if comma < 0 or close < 0 or comma > close:
        return Limits(0, _read_int(body))
    return Limits(_read_int(body), _read_int(body[comma + 1:]))


def _token_end(line: str, pos: int) -> int:
    while _at(line, pos) not in _TOKEN_ENDS:
        pos += 1
    return pos


def _skip_run(line: str, pos: int, char: str, minimum: int, line_number: int) -> int:
    count = 0
    while _at(line, pos + count) == char and char != _END:
        count += 1
    if count < minimum:
        what = " space " if char == " " else f" '{char}' "
        raise ScanError(
            f"Need at least {minimum}{what}between arguments, line '{line_number}'",
            line_number,
        )
    return pos + count


def _mismatch(line_number: int, needed: str, found: str) -> ScanError:
    shown = "new_line" if needed == "\n" else needed
    return ScanError(
        f"Incorrect character detected, found '{found}' expecting '{shown}', "
        f"line : '{line_number}'",
        line_number,
    )


def scan(line_num: int, fmt: str, line: str) -> list[int | float]:
    """Read the values that fmt describes from line, in order.

    Raises ScanError when the line does not match the format.
    """
    fmt = fmt.split(_END, 1)[0]
    values: list[int | float] = []
    f = 0
    pos = 0
    while f < len(fmt):
        current = fmt[f]
        following = _at(fmt, f + 1)
        if following in ("*", "+"):
            pos = _skip_run(line, pos, current, int(following == "+"), line_num)
            f += 2
            continue
        if current == "%":
            f += 1
            type_char = _at(fmt, f)
            field = line[pos:]
            if type_char in ("f", "d", "8"):
                limits = _field_limits(type_char, fmt[f + 1:])
                if type_char == "f":
                    values.append(parse_float(field, line_num, limits))
                elif type_char == "d":
                    values.append(parse_int(field, line_num, limits))
                else:
                    values.append(parse_int(field, line_num, limits) & 0xFF)
            pos = _token_end(line, pos)
            if _at(fmt, f + 1) == "[":
                close = fmt.find("]", f)
                if close < 0:
                    raise ScanError(
                        f"Unterminated range in format, line : '{line_num}'", line_num
                    )
                f = close
            f += 1
            continue
        found = _at(line, pos)
        if current != found and not (found == _END and current == "\n"):
            raise _mismatch(line_num, current, found)
        pos += 1
        f += 1
    return values