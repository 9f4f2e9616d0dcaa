"""State and rules of one game played through the window."""

from __future__ import annotations

import enum
import random
import string
from collections.abc import Sequence
from dataclasses import dataclass, field

from wordlegui.charclass import is_alpha, to_lower
from wordlegui.words import (
    WORD_LENGTH,
    LetterState,
    get_feedback,
    is_in_word_list,
    random_word,
)

MAX_GUESSES = 6
INVALID_STATE = 3
"""Tile state shown for the letters of a rejected guess."""


class GameStatus(enum.IntEnum):
    """Whether the game is running, lost or won."""

    PLAYING = 0
    LOST = 1
    WON = 2


class ReferenceMark(enum.IntEnum):
    """What is known about one letter of the alphabet."""

    UNKNOWN = 0
    ABSENT = 1
    PRESENT = 2


@dataclass
class Guess:
    """The letters typed on one row and the state of each tile."""

    letters: str = ""
    states: list[int] = field(default_factory=lambda: [0] * WORD_LENGTH)


def _fresh_guesses() -> list[Guess]:
    return [Guess() for _ in range(MAX_GUESSES)]


def _fresh_reference() -> dict[str, ReferenceMark]:
    return {letter: ReferenceMark.UNKNOWN for letter in string.ascii_lowercase}


@dataclass
class GameState:
    """A game: the word to find, the guesses made and the letter reference."""

    words: Sequence[str]
    word: str | None = None
    rng: random.Random = field(default_factory=random.Random)
    guesses: list[Guess] = field(default_factory=_fresh_guesses)
    current: int = 0
    reference: dict[str, ReferenceMark] = field(default_factory=_fresh_reference)
    status: GameStatus = GameStatus.PLAYING
    message: str | None = None

    def __post_init__(self) -> None:
        if self.word is None:
            self.word = random_word(self.words, self.rng)

    @property
    def current_guess(self) -> Guess | None:
        """The row being typed, or None once every row is used."""
        if self.current < MAX_GUESSES:
            return self.guesses[self.current]
        return None

    def _clear_state(self) -> None:
        guess = self.current_guess
        if guess is not None:
            guess.states = [0] * WORD_LENGTH
        self.message = None

    def type_letter(self, char: str) -> bool:
        """Add the first character of char to the row when it is a letter.

        Returns True when a letter was added.
        """
        if self.status is not GameStatus.PLAYING or not char:
            return False
        guess = self.current_guess
        if guess is None or len(guess.letters) >= WORD_LENGTH:
            return False
        letter = char[0]
        if not is_alpha(letter):
            return False
        guess.letters += to_lower(letter)
        self._clear_state()
        return True

    def backspace(self) -> None:
        """Remove the last letter of the row being typed."""
        if self.status is not GameStatus.PLAYING:
            return
        guess = self.current_guess
        if guess is None:
            return
        guess.letters = guess.letters[:-1]
        self._clear_state()

    def _reject(self, message: str, guess: Guess) -> None:
        self.message = message
        for index in range(len(guess.letters)):
            guess.states[index] = INVALID_STATE

    def submit(self) -> bool:
        """Check the row being typed.

        Returns True when the guess was scored, False when it was refused;
        a refused guess gets a message and its tiles are marked invalid.
        """
        guess = self.current_guess
        if self.status is not GameStatus.PLAYING or guess is None:
            return False
        if len(guess.letters) != WORD_LENGTH:
            self._reject("Not a 5 letter word", guess)
            return False
        if not is_in_word_list(self.words, guess.letters):
            self._reject("Unrecognized word", guess)
            return False

        assert self.word is not None
        feedback = get_feedback(guess.letters, self.word)
        guess.states = [int(state) for state in feedback]
        for letter, state in zip(guess.letters, feedback):
            if self.reference.get(letter) is ReferenceMark.PRESENT:
                continue
            if state is LetterState.ABSENT:
                self.reference[letter] = ReferenceMark.ABSENT
            else:
                self.reference[letter] = ReferenceMark.PRESENT

        if all(state is LetterState.CORRECT for state in feedback):
            self.status = GameStatus.WON
            self.message = "Congratulations!!"
            return True

        self.current += 1
        if self.current == MAX_GUESSES:
            self.status = GameStatus.LOST
            self.message = f"Game Over! The word was {self.word}"
        return True

    def reset(self) -> None:
        """Start a new game with a new word from the same list."""
        self.guesses = _fresh_guesses()
        self.current = 0
        self.reference = _fresh_reference()
        self.status = GameStatus.PLAYING
        self.message = None
        self.word = random_word(self.words, self.rng)