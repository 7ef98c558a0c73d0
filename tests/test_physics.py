import pytest

from paddleplay.ball import BALL_RADIUS, Ball
from paddleplay.collisions import CollisionEvent, PhysicalInteractionActor as Actor
from paddleplay.geometry import Vec2
from paddleplay.paddle import PADDLE_HEIGHT, PADDLE_WIDTH, spawn_paddle
from paddleplay.physics import ball_and_paddle_interaction, ball_and_wall_interaction

WIDTH = 800.0
HEIGHT = 600.0


class _FixedRng:
    def uniform(self, low, high):
        return 0.0

    def random(self):
        return 0.0


def _ball(position, direction):
    return Ball(position, direction, _FixedRng())


def test_no_collision_in_middle_of_room():
    ball = _ball(Vec2(WIDTH / 2, HEIGHT / 2), Vec2(0.6, 0.8))
    assert ball_and_wall_interaction(ball, WIDTH, HEIGHT) is None
    assert ball.direction == Vec2(0.6, 0.8)


def test_left_wall_reverses_x():
    ball = _ball(Vec2(BALL_RADIUS, HEIGHT / 2), Vec2(-1.0, 0.0))
    event = ball_and_wall_interaction(ball, WIDTH, HEIGHT)
    assert event == CollisionEvent(Actor.BALL, Actor.SIDE_WALL)
    assert ball.direction.x == pytest.approx(1.0)


def test_right_wall_reverses_x():
    ball = _ball(Vec2(WIDTH - BALL_RADIUS, HEIGHT / 2), Vec2(1.0, 0.0))
    event = ball_and_wall_interaction(ball, WIDTH, HEIGHT)
    assert event == CollisionEvent(Actor.BALL, Actor.SIDE_WALL)
    assert ball.direction.x == pytest.approx(-1.0)


def test_ceiling_reverses_y():
    ball = _ball(Vec2(WIDTH / 2, HEIGHT - BALL_RADIUS), Vec2(0.0, 1.0))
    event = ball_and_wall_interaction(ball, WIDTH, HEIGHT)
    assert event == CollisionEvent(Actor.BALL, Actor.CEILING)
    assert ball.direction.y == pytest.approx(-1.0)


def test_floor_reverses_y():
    ball = _ball(Vec2(WIDTH / 2, BALL_RADIUS), Vec2(0.0, -1.0))
    event = ball_and_wall_interaction(ball, WIDTH, HEIGHT)
    assert event == CollisionEvent(Actor.BALL, Actor.FLOOR)
    assert ball.direction.y == pytest.approx(1.0)


def test_ball_moving_away_from_wall_is_ignored():
    ball = _ball(Vec2(BALL_RADIUS, HEIGHT / 2), Vec2(1.0, 0.0))
    assert ball_and_wall_interaction(ball, WIDTH, HEIGHT) is None
    assert ball.direction == Vec2(1.0, 0.0)


def test_corner_reports_vertical_target_and_flips_both():
    ball = _ball(Vec2(BALL_RADIUS, HEIGHT - BALL_RADIUS), Vec2(-0.6, 0.8))
    event = ball_and_wall_interaction(ball, WIDTH, HEIGHT)
    assert event == CollisionEvent(Actor.BALL, Actor.CEILING)
    assert ball.direction.x > 0
    assert ball.direction.y < 0


def test_paddle_sends_falling_ball_upwards():
    paddle = spawn_paddle(WIDTH)
    ball = _ball(Vec2(paddle.x, paddle.y + PADDLE_HEIGHT / 2 + BALL_RADIUS), Vec2(0.0, -1.0))
    event = ball_and_paddle_interaction(ball, paddle)
    assert event == CollisionEvent(Actor.BALL, Actor.PADDLE)
    assert ball.direction.y == pytest.approx(1.0)


def test_paddle_ignores_rising_ball():
    paddle = spawn_paddle(WIDTH)
    ball = _ball(Vec2(paddle.x, paddle.y), Vec2(0.6, 0.8))
    assert ball_and_paddle_interaction(ball, paddle) is None
    assert ball.direction == Vec2(0.6, 0.8)


def test_paddle_ignores_distant_ball():
    paddle = spawn_paddle(WIDTH)
    ball = _ball(Vec2(paddle.x + PADDLE_WIDTH, HEIGHT / 2), Vec2(0.0, -1.0))
    assert ball_and_paddle_interaction(ball, paddle) is None
    assert ball.direction == Vec2(0.0, -1.0)


def test_ball_just_beyond_paddle_edge_does_not_hit():
    paddle = spawn_paddle(WIDTH)
    ball = _ball(
        Vec2(paddle.x, paddle.y + PADDLE_HEIGHT / 2 + BALL_RADIUS + 1.0), Vec2(0.0, -1.0)
    )
    assert ball_and_paddle_interaction(ball, paddle) is None