"""Ordering comparisons of strings, whole, by prefix and by suffix.

Each comparison returns a negative number, zero or a positive number. The
sign comes from the difference between the first pair of characters that
differ. Text ends at its first NUL character, as a C string would.
"""

from __future__ import annotations

from itertools import zip_longest


def _terminated(text: str) -> str:
    """Return text up to, and not including, its first NUL character."""
    return text.split("\0", 1)[0]


def _code(char: str) -> int:
    """Code point of char, with the end of the text counting as 0."""
    return ord(char) if char else 0


def compare(s1: str, s2: str) -> int:
    """Compare two strings character by character."""
    for a, b in zip_longest(_terminated(s1), _terminated(s2), fillvalue=""):
        if a != b:
            return _code(a) - _code(b)
    return 0


def compare_prefix(s1: str, s2: str, n: int) -> int:
    """Compare at most the first n characters of two strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    return compare(_terminated(s1)[:n], _terminated(s2)[:n])


def compare_suffix(s1: str, s2: str, n: int) -> int:
    """Compare the last n characters of two strings, from the end backwards.

    When n is larger than either string it is reduced to the length of the
    shorter one.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    first = _terminated(s1)
    second = _terminated(s2)
    n = min(n, len(first), len(second))
    for a, b in zip(reversed(first[len(first) - n:]), reversed(second[len(second) - n:])):
        if a != b:
            return ord(a) - ord(b)
    return 0