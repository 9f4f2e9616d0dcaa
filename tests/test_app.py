import random

import pygame
import pytest

from wordlegui.app import daily_word, handle_event, main
from wordlegui.game import GameState, GameStatus

WORDS = [
    "crane", "slate", "trace", "crate", "brine",
    "plumb", "ghost", "fjord", "winds", "pique",
]


@pytest.fixture
def game():
    return GameState(WORDS, word="crane", rng=random.Random(4))


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def text(value):
    return pygame.event.Event(pygame.TEXTINPUT, text=value)


def test_daily_word_stable_within_day():
    start = 20000 * 86400
    assert daily_word(WORDS, start) == daily_word(WORDS, start + 86399)
    assert daily_word(WORDS, start) in WORDS


def test_quit_event_stops(game):
    assert handle_event(game, pygame.event.Event(pygame.QUIT)) is False


def test_text_input_types(game):
    assert handle_event(game, text("C")) is True
    handle_event(game, text("7"))
    assert game.guesses[0].letters == "c"


def test_backspace_key(game):
    handle_event(game, text("c"))
    handle_event(game, text("r"))
    handle_event(game, key(pygame.K_BACKSPACE))
    assert game.guesses[0].letters == "c"


def test_return_submits_then_resets(game):
    for char in "crane":
        handle_event(game, text(char))
    handle_event(game, key(pygame.K_RETURN))
    assert game.status is GameStatus.WON
    handle_event(game, key(pygame.K_BACKSPACE))
    assert game.guesses[0].letters == "crane"
    handle_event(game, key(pygame.K_RETURN))
    assert game.status is GameStatus.PLAYING
    assert game.guesses[0].letters == ""


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "none.txt")]) == 1
    assert "Failed to load words: system error" in capsys.readouterr().err


def test_main_bad_format(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("abc\n")
    assert main([str(path)]) == 1
    assert "Failed to load words: invalid file format" in capsys.readouterr().err


def test_main_too_few_words(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("crane\nslate\n")
    assert main([str(path)]) == 1
    assert "Failed to load words: not enough words" in capsys.readouterr().err