"""The game window."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Sequence
from pathlib import Path

import pygame

from wordlegui.confetti import WinAnimation
from wordlegui.game import GameState, GameStatus
from wordlegui.render import (
    BACKGROUND,
    WINDOW_SIZE,
    Assets,
    render_confetti,
    render_wordle,
)
from wordlegui.words import (
    InvalidFormatError,
    NotEnoughWordsError,
    load_word_list,
    random_word,
)

SECONDS_PER_DAY = 86400
FRAME_RATE = 60


def daily_word(words: Sequence[str], now: float) -> str:
    """Word of the day: the same for every call within one UTC day."""
    return random_word(words, random.Random(int(now // SECONDS_PER_DAY)))


def handle_event(game: GameState, event: pygame.event.Event) -> bool:
    """Apply one window event to the game. Returns False on a quit request."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.TEXTINPUT:
        game.type_letter(event.text)
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_RETURN:
            if game.status is not GameStatus.PLAYING:
                game.reset()
                return True
            game.submit()
        if game.status is not GameStatus.PLAYING:
            return True
        if event.key == pygame.K_BACKSPACE:
            game.backspace()
    return True


def _run(words: Sequence[str]) -> int:
    pygame.init()
    pygame.font.init()
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption("wordle gui")
    assets = Assets.load(Path("res"))
    pygame.key.start_text_input()

    now = time.time()
    game = GameState(words, word=daily_word(words, now), rng=random.Random(int(now)))
    animation = WinAnimation()
    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(game, event):
                running = False
        if game.status is not GameStatus.WON and animation.started:
            animation.reset()
        screen.fill(BACKGROUND)
        render_wordle(screen, game, assets)
        if game.status is GameStatus.WON:
            render_confetti(screen, animation, assets)
        pygame.display.flip()
        clock.tick(FRAME_RATE)
    pygame.key.stop_text_input()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window for the word list named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: wordle <words.txt>", file=sys.stderr)
        return 1
    try:
        words = load_word_list(args[0])
    except InvalidFormatError:
        print("Failed to load words: invalid file format", file=sys.stderr)
        return 1
    except NotEnoughWordsError:
        print("Failed to load words: not enough words", file=sys.stderr)
        return 1
    except OSError:
        print("Failed to load words: system error", file=sys.stderr)
        return 1

    major, minor, patch = pygame.get_sdl_version()
    print(f"Using SDL v{major}.{minor}.{patch}")
    try:
        return _run(words)
    except (pygame.error, OSError) as exc:
        print(f"Failed to run the game: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())