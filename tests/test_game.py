import random

import pytest

from wordlegui.game import (
    INVALID_STATE,
    MAX_GUESSES,
    GameState,
    GameStatus,
    ReferenceMark,
)
from wordlegui.words import get_feedback

WORDS = [
    "crane", "slate", "trace", "crate", "brine",
    "plumb", "ghost", "fjord", "winds", "pique",
]


@pytest.fixture
def game():
    return GameState(WORDS, word="crane", rng=random.Random(3))


def type_word(game, word):
    for char in word:
        game.type_letter(char)


def test_letters_are_lowered(game):
    assert game.type_letter("A") is True
    assert game.guesses[0].letters == "a"


def test_non_letters_ignored(game):
    assert game.type_letter("1") is False
    assert game.type_letter("") is False
    assert game.guesses[0].letters == ""


def test_row_holds_five_letters(game):
    type_word(game, "abcdefg")
    assert game.guesses[0].letters == "abcde"


def test_backspace_removes_last(game):
    type_word(game, "cra")
    game.backspace()
    assert game.guesses[0].letters == "cr"
    game.backspace()
    game.backspace()
    game.backspace()
    assert game.guesses[0].letters == ""


def test_short_word_rejected(game):
    type_word(game, "cra")
    assert game.submit() is False
    assert game.message == "Not a 5 letter word"
    assert game.guesses[0].states[:3] == [INVALID_STATE] * 3
    assert game.current == 0


def test_unknown_word_rejected(game):
    type_word(game, "zzzzz")
    assert game.submit() is False
    assert game.message == "Unrecognized word"
    assert game.guesses[0].states == [INVALID_STATE] * 5


def test_typing_clears_rejection(game):
    type_word(game, "zzzzz")
    game.submit()
    game.backspace()
    assert game.message is None
    assert game.guesses[0].states == [0] * 5


def test_wrong_guess_is_scored(game):
    type_word(game, "slate")
    assert game.submit() is True
    assert game.current == 1
    assert game.guesses[0].states == [int(s) for s in get_feedback("slate", "crane")]
    assert game.reference["s"] is ReferenceMark.ABSENT
    assert game.reference["a"] is ReferenceMark.PRESENT
    assert game.reference["q"] is ReferenceMark.UNKNOWN


def test_present_mark_is_kept(game):
    type_word(game, "trace")
    game.submit()
    assert game.reference["r"] is ReferenceMark.PRESENT
    type_word(game, "brine")
    game.submit()
    assert game.reference["r"] is ReferenceMark.PRESENT


def test_correct_guess_wins(game):
    type_word(game, "crane")
    assert game.submit() is True
    assert game.status is GameStatus.WON
    assert game.message == "Congratulations!!"
    assert game.current == 0


def test_six_misses_lose(game):
    for word in ["slate", "trace", "brine", "plumb", "ghost", "fjord"]:
        type_word(game, word)
        game.submit()
    assert game.status is GameStatus.LOST
    assert game.current == MAX_GUESSES
    assert game.current_guess is None
    assert game.message == "Game Over! The word was crane"
    assert game.type_letter("a") is False


def test_no_input_after_win(game):
    type_word(game, "crane")
    game.submit()
    assert game.type_letter("a") is False
    game.backspace()
    assert game.guesses[0].letters == "crane"


def test_reset_starts_over(game):
    type_word(game, "crane")
    game.submit()
    game.reset()
    assert game.status is GameStatus.PLAYING
    assert game.word in WORDS
    assert game.current == 0
    assert all(g.letters == "" for g in game.guesses)
    assert set(game.reference.values()) == {ReferenceMark.UNKNOWN}
    assert game.message is None


def test_word_chosen_when_missing():
    game = GameState(WORDS, rng=random.Random(1))
    assert game.word in WORDS