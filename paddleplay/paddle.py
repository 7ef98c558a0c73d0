"""The paddle with which the ball is hit."""

from __future__ import annotations

from dataclasses import dataclass, field

from paddleplay.geometry import Vec2

PADDLE_DEPTH = 1.0
PADDLE_WIDTH = 310.0
PADDLE_HEIGHT = 30.0
PADDLE_SPEED = 700.0
PADDLE_SPRITE = "sprites/paddle_12.png"


@dataclass
class Paddle:
    """The paddle's centre; it slides only sideways along the bottom of the window."""

    x: float
    y: float = field(default=PADDLE_HEIGHT / 2.0, init=False)

    @property
    def position(self) -> Vec2:
        """The paddle's centre as a vector."""
        return Vec2(self.x, self.y)

    def move(self, direction: float, dt: float, window_width: float) -> None:
        """Slide in ``direction`` for ``dt`` seconds, kept inside the window.

        A direction of zero (no key held) leaves the paddle where it is.
        """
        if not direction:
            return
        left_edge = PADDLE_WIDTH / 2.0
        right_edge = window_width - PADDLE_WIDTH / 2.0
        if left_edge > right_edge:
            raise ValueError(f"window width {window_width} is narrower than the paddle")
        new_x = self.x + direction * PADDLE_SPEED * dt
        self.x = min(max(new_x, left_edge), right_edge)


def spawn_paddle(window_width: float) -> Paddle:
    """Create the paddle centred at the bottom of the window."""
    return Paddle(window_width / 2.0)