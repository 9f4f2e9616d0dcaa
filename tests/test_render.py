import random

import pygame
import pytest

from wordlegui.confetti import WinAnimation
from wordlegui.game import GameState, GameStatus
from wordlegui.render import (
    BACKGROUND,
    GRAY,
    GREEN,
    RED,
    REFERENCE_X,
    Assets,
    render_confetti,
    render_wordle,
    tile_color,
    tile_rect,
)

WORDS = [
    "crane", "slate", "trace", "crate", "brine",
    "plumb", "ghost", "fjord", "winds", "pique",
]


@pytest.fixture
def assets():
    pygame.font.init()
    font = pygame.font.Font(None, 24)
    return Assets(
        chars=pygame.Surface((26 * 64, 64), pygame.SRCALPHA),
        confetti=pygame.Surface((64, 16)),
        font=font,
        reference_label=font.render("Reference", True, (255, 255, 255)),
        play_again_label=font.render("Press ENTER to play again", True, (255, 255, 255)),
    )


def new_screen():
    screen = pygame.Surface((780, 550))
    screen.fill(BACKGROUND)
    return screen


def play(game, word):
    for char in word:
        game.type_letter(char)
    game.submit()


def pixel(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_first_tile_position():
    assert tile_rect(0, 0) == pygame.Rect(25, 25, 64, 64)


def test_tiles_do_not_overlap():
    for row in range(6):
        for col in range(4):
            assert not tile_rect(row, col).colliderect(tile_rect(row, col + 1))
        assert tile_rect(row, 4).right < REFERENCE_X
    assert not tile_rect(0, 0).colliderect(tile_rect(1, 0))


def test_tile_colors():
    assert tile_color(0) == GRAY
    assert tile_color(2) == GREEN
    assert tile_color(3) == RED


def test_scored_row_is_filled(assets):
    game = GameState(WORDS, word="crane", rng=random.Random(1))
    play(game, "crate")
    screen = new_screen()
    render_wordle(screen, game, assets)
    assert pixel(screen, tile_rect(0, 0).center) == tile_color(game.guesses[0].states[0])
    assert pixel(screen, tile_rect(1, 0).center) == BACKGROUND


def test_reference_marks_drawn(assets):
    game = GameState(WORDS, word="crane", rng=random.Random(1))
    play(game, "slate")
    screen = new_screen()
    render_wordle(screen, game, assets)
    left = REFERENCE_X + 25
    s_index = ord("s") - ord("a")
    s_point = (left + 64 * (s_index % 5) + 32, 50 + 64 * (s_index // 5) + 32)
    red, green, blue = pixel(screen, s_point)
    assert red > green and red > blue
    z_index = ord("z") - ord("a")
    z_point = (left + 64 * (z_index % 5) + 32, 50 + 64 * (z_index // 5) + 32)
    assert pixel(screen, z_point) == BACKGROUND


def test_won_game_fills_row(assets):
    game = GameState(WORDS, word="crane", rng=random.Random(1))
    play(game, "crane")
    assert game.status is GameStatus.WON
    screen = new_screen()
    render_wordle(screen, game, assets)
    assert pixel(screen, tile_rect(0, 4).center) == GREEN


def test_render_confetti_starts_animation(assets):
    animation = WinAnimation(amount=20)
    screen = new_screen()
    render_confetti(screen, animation, assets)
    assert animation.started is True
    assert len(animation.confetti) == 20
    assert all(0 <= piece.texture_index < 4 for piece in animation.confetti)


def test_load_missing_resources(tmp_path):
    with pytest.raises(FileNotFoundError):
        Assets.load(tmp_path)