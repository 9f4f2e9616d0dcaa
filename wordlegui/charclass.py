"""ASCII character classification and case conversion.

Every function takes either a one character string or an integer code
point. The case conversions return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACE_CHARS = frozenset(" \t\n\r\v\f")
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the code point of a one character string or an integer."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code point")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    raise TypeError("expected a character or an integer code point")


def is_alpha(c: CharLike) -> bool:
    """Tell whether c is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """Tell whether c is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """Tell whether c is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """Tell whether c lies in the ASCII range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Tell whether c is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: CharLike) -> bool:
    """Tell whether c is one of space, tab, newline, CR, VT or FF."""
    code = _code(c)
    return 0 <= code <= 0x10FFFF and chr(code) in _SPACE_CHARS


def to_upper(c: CharLike) -> CharLike:
    """Turn an ASCII lower case letter into upper case; leave others alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Turn an ASCII upper case letter into lower case; leave others alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code