"""Word list loading and guess scoring."""

from __future__ import annotations

import enum
import os
import random
from collections import Counter
from collections.abc import Sequence

WORD_LENGTH = 5
MIN_WORD_COUNT = 10


class LetterState(enum.IntEnum):
    """Score of one letter of a guess."""

    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


class WordListError(Exception):
    """A word list could not be used."""


class InvalidFormatError(WordListError):
    """A line of the word list is not a five letter word."""


class NotEnoughWordsError(WordListError):
    """The word list holds fewer words than required."""


def load_word_list(path: str | os.PathLike[str]) -> list[str]:
    """Read a word list with one five letter word per line.

    Raises OSError when the file cannot be read, InvalidFormatError when a
    line is not exactly five characters long and NotEnoughWordsError when
    fewer than ten words are present.
    """
    with open(path, "rb") as handle:
        data = handle.read()

    lines = data.split(b"\n")
    if lines and lines[-1] == b"":
        lines.pop()

    words = []
    for line in lines:
        if len(line) != WORD_LENGTH:
            raise InvalidFormatError("one or more words are not five characters long")
        words.append(line.decode("latin-1"))

    if len(words) < MIN_WORD_COUNT:
        raise NotEnoughWordsError(
            f"fewer than {MIN_WORD_COUNT} words present in the word list"
        )
    return words


def random_word(words: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick a word from the list using the given random generator."""
    if not words:
        raise ValueError("word list is empty")
    source = rng if rng is not None else random
    index = int(source.random() * len(words))
    return words[min(index, len(words) - 1)]


def is_in_word_list(words: Sequence[str], word: str) -> bool:
    """Tell whether the first five characters of word match a listed word."""
    prefix = word[:WORD_LENGTH]
    return any(entry[:WORD_LENGTH] == prefix for entry in words)


def get_feedback(guess: str, target: str) -> list[LetterState]:
    """Score a five letter guess against the target word."""
    pairs = list(zip(guess[:WORD_LENGTH], target[:WORD_LENGTH]))
    if len(pairs) != WORD_LENGTH:
        raise ValueError("guess and target must both have five letters")

    result = [
        LetterState.CORRECT if g == t else LetterState.ABSENT for g, t in pairs
    ]
    remaining = Counter(t for g, t in pairs if g != t)
    for position, (letter, _) in enumerate(pairs):
        if result[position] is LetterState.ABSENT and remaining[letter] > 0:
            result[position] = LetterState.PRESENT
            remaining[letter] -= 1
    return result