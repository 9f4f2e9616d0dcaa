"""Drawing of the board, the letter reference and the confetti."""

from __future__ import annotations

import os
import string
from dataclasses import dataclass
from pathlib import Path

import pygame

from wordlegui.confetti import SQUARE as CONFETTI_SQUARE
from wordlegui.confetti import WinAnimation
from wordlegui.game import GameState, GameStatus, ReferenceMark

WINDOW_SIZE = (780, 550)
BACKGROUND = (35, 35, 35)
WHITE = (255, 255, 255)
DIM = (100, 100, 100)

START_X = 25
START_Y = 25
OFFSET_X = 5
OFFSET_Y = 10
SQUARE = 64
MIDDLE_X = START_X + OFFSET_X * 2 + SQUARE * 2.5
REFERENCE_X = START_X * 2 + OFFSET_X * 4 + SQUARE * 5
REFERENCE_LABEL_Y = 15
REFERENCE_Y = 50
TEXT_Y = START_Y + OFFSET_Y * 7 + SQUARE * 6
REFERENCE_ROW_WIDTH = 320

GRAY = (75, 75, 75)
YELLOW = (232, 213, 65)
GREEN = (53, 204, 86)
RED = (230, 55, 55)

_MARK_COLORS = {
    ReferenceMark.ABSENT: (255, 0, 0, 100),
    ReferenceMark.PRESENT: (0, 255, 0, 100),
}


@dataclass
class Assets:
    """Images and text used to draw the game."""

    chars: pygame.Surface
    confetti: pygame.Surface
    font: pygame.font.Font
    reference_label: pygame.Surface
    play_again_label: pygame.Surface

    @classmethod
    def load(cls, res_dir: str | os.PathLike[str]) -> "Assets":
        """Load the resources from res_dir."""
        base = Path(res_dir)
        chars_path = base / "chars.bmp"
        confetti_path = base / "confetti.bmp"
        font_path = base / "Ubuntu-Regular.ttf"
        for path in (chars_path, confetti_path, font_path):
            if not path.is_file():
                raise FileNotFoundError(f"missing resource: {path}")
        chars = pygame.image.load(str(chars_path))
        confetti = pygame.image.load(str(confetti_path))
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(str(font_path), 24)
        return cls(
            chars=chars,
            confetti=confetti,
            font=font,
            reference_label=font.render("Reference", True, WHITE),
            play_again_label=font.render("Press ENTER to play again", True, WHITE),
        )


def tile_rect(row: int, col: int) -> pygame.Rect:
    """Screen rectangle of the board tile at row and col."""
    return pygame.Rect(
        START_X + col * (SQUARE + OFFSET_X),
        START_Y + row * (SQUARE + OFFSET_Y),
        SQUARE,
        SQUARE,
    )


def tile_color(state: int) -> tuple[int, int, int]:
    """Fill color of a scored tile."""
    return {0: GRAY, 1: YELLOW, 2: GREEN}.get(int(state), RED)


def _letter_area(letter: str) -> pygame.Rect:
    return pygame.Rect((ord(letter) - ord("a")) * SQUARE, 0, SQUARE, SQUARE)


def _draw_board(surface: pygame.Surface, game: GameState, assets: Assets) -> None:
    filled_rows = game.current + (game.status is not GameStatus.PLAYING)
    for row, guess in enumerate(game.guesses):
        for col in range(len(guess.states)):
            rect = tile_rect(row, col)
            if row < filled_rows:
                surface.fill(tile_color(guess.states[col]), rect)
            outline = WHITE if row <= game.current else DIM
            pygame.draw.rect(surface, outline, rect, 1)
            if col < len(guess.letters):
                surface.blit(assets.chars, rect, area=_letter_area(guess.letters[col]))


def _draw_reference(surface: pygame.Surface, game: GameState, assets: Assets) -> None:
    pygame.draw.line(
        surface, DIM, (REFERENCE_X, 0), (REFERENCE_X, WINDOW_SIZE[1])
    )
    left = REFERENCE_X + START_X
    surface.blit(assets.reference_label, (left, REFERENCE_LABEL_Y))
    for row in range(6):
        width = SQUARE if row == 5 else REFERENCE_ROW_WIDTH
        surface.blit(
            assets.chars,
            (left, REFERENCE_Y + SQUARE * row),
            area=pygame.Rect(row * REFERENCE_ROW_WIDTH, 0, width, SQUARE),
        )
    overlay = pygame.Surface((SQUARE, SQUARE), pygame.SRCALPHA)
    for index, letter in enumerate(string.ascii_lowercase):
        color = _MARK_COLORS.get(game.reference.get(letter, ReferenceMark.UNKNOWN))
        if color is None:
            continue
        overlay.fill(color)
        surface.blit(
            overlay,
            (left + SQUARE * (index % 5), REFERENCE_Y + SQUARE * (index // 5)),
        )


def render_wordle(surface: pygame.Surface, game: GameState, assets: Assets) -> None:
    """Draw the board, the status text and the letter reference."""
    _draw_board(surface, game, assets)
    if game.message:
        text = assets.font.render(game.message, True, WHITE)
        surface.blit(text, (int(MIDDLE_X - text.get_width() * 0.5), TEXT_Y))
    _draw_reference(surface, game, assets)
    if game.status is not GameStatus.PLAYING:
        label = assets.play_again_label
        surface.blit(
            label, (int(REFERENCE_X + MIDDLE_X - label.get_width() * 0.5), TEXT_Y)
        )


def render_confetti(
    surface: pygame.Surface, animation: WinAnimation, assets: Assets
) -> None:
    """Advance the win animation one frame and draw it."""
    if not animation.started:
        sheet = assets.confetti
        animation.start(sheet.get_width() // sheet.get_height())
    if animation.finished:
        return
    size = int(CONFETTI_SQUARE)
    for piece in animation.step():
        height = piece.height
        drawn = round(abs(height))
        if drawn < 1:
            continue
        image = assets.confetti.subsurface(
            pygame.Rect(piece.texture_index * size, 0, size, size)
        )
        image = pygame.transform.scale(image, (size, drawn))
        if height < 0:
            image = pygame.transform.flip(image, False, True)
        image = pygame.transform.rotate(image, -piece.angle)
        center = (round(piece.x), round(piece.y - CONFETTI_SQUARE / 2 + height / 2))
        surface.blit(image, image.get_rect(center=center))