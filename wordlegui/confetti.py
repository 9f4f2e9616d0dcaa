"""Confetti that bursts from the bottom corners when a game is won."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

CONFETTI_AMOUNT = 1024
SQUARE = 16.0
FLOOR_Y = 550.0
LEFT_X = -17.0
RIGHT_X = 797.0


@dataclass
class Confetti:
    """One piece of confetti and its motion."""

    x: float
    y: float
    vx: float
    vy: float
    drag: float
    gravity: float
    angle: float
    angular_velocity: float
    angular_drag: float
    flip_sine: float
    flip_vel: float
    texture_index: int

    @property
    def height(self) -> float:
        """Drawn height; negative when the piece shows its back."""
        return SQUARE * math.cos(self.flip_sine)

    def advance(self) -> bool:
        """Move one frame. Returns True while the piece is still on screen."""
        self.vy += self.gravity
        self.vx /= self.drag
        self.angular_velocity /= self.angular_drag
        self.x += self.vx
        self.y += self.vy
        self.angle += self.angular_velocity
        self.flip_sine += self.flip_vel
        return self.y <= FLOOR_Y + SQUARE


def spawn_confetti(
    count: int, texture_count: int, rng: random.Random | None = None
) -> list[Confetti]:
    """Create count pieces, alternately launched from the right and left."""
    if texture_count <= 0:
        raise ValueError("texture_count must be positive")
    source = rng if rng is not None else random

    def uniform(upper: float) -> float:
        return source.random() * upper

    pieces = []
    for index in range(count):
        from_left = index % 2 == 1
        direction = math.pi / 6 if from_left else math.pi - math.pi / 6
        direction += uniform(math.pi / 2) - math.pi / 4
        velocity = uniform(20.0) + 5.0
        pieces.append(
            Confetti(
                x=LEFT_X if from_left else RIGHT_X,
                y=FLOOR_Y,
                vx=math.cos(direction) * velocity,
                vy=-math.sin(direction) * velocity,
                gravity=uniform(0.2) + 0.2,
                drag=uniform(0.01) + 1.02,
                angle=uniform(360.0),
                angular_velocity=uniform(10.0) - 5.0,
                angular_drag=uniform(0.1) + 1.05,
                texture_index=source.randrange(texture_count),
                flip_sine=uniform(math.pi),
                flip_vel=(uniform(math.pi / 4) - math.pi / 8) * 0.06125,
            )
        )
    return pieces


@dataclass
class WinAnimation:
    """The confetti burst shown after a win."""

    amount: int = CONFETTI_AMOUNT
    started: bool = False
    finished: bool = False
    confetti: list[Confetti] = field(default_factory=list)

    def start(self, texture_count: int, rng: random.Random | None = None) -> None:
        """Launch a fresh burst."""
        self.confetti = spawn_confetti(self.amount, texture_count, rng)
        self.started = True
        self.finished = False

    def step(self) -> list[Confetti]:
        """Advance every piece one frame and return those still on screen."""
        if not self.started:
            raise RuntimeError("animation has not been started")
        if self.finished:
            return []
        visible = [piece for piece in self.confetti if piece.advance()]
        if not visible:
            self.finished = True
        return visible

    def reset(self) -> None:
        """Forget the burst so that the next win starts a new one."""
        self.started = False
        self.finished = False
        self.confetti = []