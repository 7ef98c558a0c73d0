"""Hit detection between the ball, the room's walls and the paddle."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from paddleplay.ball import BALL_RADIUS, Ball
from paddleplay.collisions import CollisionEvent, PhysicalInteractionActor
from paddleplay.geometry import Vec2, circle_intersects_aabb
from paddleplay.paddle import PADDLE_HEIGHT, PADDLE_WIDTH, Paddle


def _points_down(direction: Vec2) -> bool:
    return direction.y < 0


def _points_left(direction: Vec2) -> bool:
    return direction.x < 0


def _points_right(direction: Vec2) -> bool:
    return direction.x > 0


def _points_up(direction: Vec2) -> bool:
    return direction.y > 0


def ball_and_wall_interaction(
    ball: Ball, window_width: float, window_height: float
) -> Optional[CollisionEvent]:
    """Bounce the ball off the walls, ceiling and floor; return the collision, if any."""
    position = ball.position
    original = ball.direction
    new_direction = original
    target = PhysicalInteractionActor.NONE
    collided = False

    if _points_left(new_direction) and position.x - BALL_RADIUS <= 0:
        new_direction = replace(new_direction, x=-new_direction.x)
        collided = True
        target = PhysicalInteractionActor.SIDE_WALL
    elif _points_right(original) and position.x + BALL_RADIUS >= window_width:
        new_direction = replace(new_direction, x=-new_direction.x)
        collided = True
        target = PhysicalInteractionActor.SIDE_WALL

    if _points_up(new_direction) and position.y + BALL_RADIUS >= window_height:
        new_direction = replace(new_direction, y=-new_direction.y)
        collided = True
        target = PhysicalInteractionActor.CEILING
    elif _points_down(original) and position.y - BALL_RADIUS <= 0:
        new_direction = replace(new_direction, y=-new_direction.y)
        collided = True
        target = PhysicalInteractionActor.FLOOR

    if not collided:
        return None
    ball.set_direction(new_direction)
    return CollisionEvent(PhysicalInteractionActor.BALL, target)


def ball_and_paddle_interaction(ball: Ball, paddle: Paddle) -> Optional[CollisionEvent]:
    """Send the ball upwards when it touches the paddle; return the collision, if any."""
    half_size = Vec2(PADDLE_WIDTH / 2.0, PADDLE_HEIGHT / 2.0)
    if not circle_intersects_aabb(ball.position, BALL_RADIUS, paddle.position, half_size):
        return None

    direction = ball.direction
    upward = replace(direction, y=abs(direction.y))
    # Only turning the ball upwards prevents jitter while it is still inside the paddle.
    if upward.y == direction.y:
        return None
    ball.set_direction(upward)
    return CollisionEvent(PhysicalInteractionActor.BALL, PhysicalInteractionActor.PADDLE)