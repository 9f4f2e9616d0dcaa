"""String splitting, trimming, searching and tokenizing helpers."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import groupby


def split(text: str, sep: str) -> list[str]:
    """Split text on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, chars: str) -> str:
    """Remove every character found in chars from both ends of text."""
    return text.strip(chars)


def find(haystack: str, needle: str, limit: int) -> int | None:
    """Find needle wholly within the first limit characters of haystack.

    Returns the index of the first match, 0 for an empty needle, and None
    when there is no match.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def tokenize(text: str, delimiters: str) -> Iterator[str]:
    """Yield the non-empty runs of text that hold no delimiter character."""
    delimiter_set = frozenset(delimiters)
    for is_delimiter, run in groupby(text, key=lambda ch: ch in delimiter_set):
        if not is_delimiter:
            yield "".join(run)