"""The ball: its direction rules and frame-by-frame movement."""

from __future__ import annotations

import random
from typing import Any, Optional

from paddleplay.collisions import DIRECTION_BACKWARD
from paddleplay.geometry import Vec2

BALL_DIAMETER = 64.0
BALL_RADIUS = 32.0
BALL_SPAWN_LATERAL_RANDOMNESS_FACTOR = 3.0
BALL_SPEED = 700.0
BALL_SPRITE = "sprites/ball_blue_large.png"
BALL_Z_INDEX = 1.0

BALL_DIRECTION_VARIABILITY = 0.19
GRAVITY = 1.015
LATERAL_DIRECTION_REDUCTION_FACTOR = 1.04


class Ball:
    """The ball's position and direction of travel."""

    def __init__(self, position: Vec2, direction: Vec2, rng: Optional[Any] = None) -> None:
        self.position = position
        self._direction = direction
        self._rng = rng if rng is not None else random.Random()

    @property
    def direction(self) -> Vec2:
        """The current direction of travel."""
        return self._direction

    def set_direction(self, new_direction: Vec2) -> None:
        """Adopt a new direction after adding variability and a pull of gravity."""
        variability = self._rng.uniform(-BALL_DIRECTION_VARIABILITY, BALL_DIRECTION_VARIABILITY)
        x = (new_direction.x + variability) / LATERAL_DIRECTION_REDUCTION_FACTOR
        y = (new_direction.y + variability) * GRAVITY
        self._direction = Vec2(x, y).normalize()

    def move(self, dt: float) -> None:
        """Advance the ball along its direction for ``dt`` seconds."""
        self.position = self.position + self._direction * (BALL_SPEED * dt)

    def __repr__(self) -> str:
        return f"Ball(position={self.position!r}, direction={self._direction!r})"


def spawn_ball(window_width: float, window_height: float, rng: Optional[Any] = None) -> Ball:
    """Create a ball at the top middle of the window, aimed down towards the paddle."""
    rng = rng if rng is not None else random.Random()
    start = Vec2(window_width / 2.0, window_height - BALL_DIAMETER)
    initial_x = rng.random() / BALL_SPAWN_LATERAL_RANDOMNESS_FACTOR
    initial_y = DIRECTION_BACKWARD * rng.random()
    return Ball(start, Vec2(initial_x, initial_y).normalize(), rng)