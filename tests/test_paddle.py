import pytest

from paddleplay.collisions import DIRECTION_BACKWARD, DIRECTION_FORWARD
from paddleplay.geometry import Vec2
from paddleplay.paddle import PADDLE_HEIGHT, PADDLE_SPEED, PADDLE_WIDTH, Paddle, spawn_paddle


def test_spawn_paddle_centred_on_bottom():
    paddle = spawn_paddle(1000.0)
    assert paddle.x * 2 == pytest.approx(1000.0)
    assert paddle.y * 2 == pytest.approx(PADDLE_HEIGHT)
    assert paddle.position == Vec2(paddle.x, paddle.y)


def test_move_forward_and_back_returns_to_start():
    paddle = Paddle(500.0)
    paddle.move(DIRECTION_FORWARD, 0.1, 1000.0)
    assert paddle.x > 500.0
    paddle.move(DIRECTION_BACKWARD, 0.1, 1000.0)
    assert paddle.x == pytest.approx(500.0)


def test_move_one_second_travels_paddle_speed():
    paddle = Paddle(PADDLE_WIDTH)
    paddle.move(DIRECTION_FORWARD, 1.0, PADDLE_WIDTH * 2 + PADDLE_SPEED * 2)
    assert paddle.x - PADDLE_WIDTH == pytest.approx(PADDLE_SPEED)


def test_move_clamped_to_right_edge():
    paddle = Paddle(500.0)
    paddle.move(DIRECTION_FORWARD, 10.0, 1000.0)
    assert paddle.x + PADDLE_WIDTH / 2 == pytest.approx(1000.0)


def test_move_clamped_to_left_edge():
    paddle = Paddle(500.0)
    paddle.move(DIRECTION_BACKWARD, 10.0, 1000.0)
    assert paddle.x - PADDLE_WIDTH / 2 == pytest.approx(0.0)


def test_no_direction_leaves_paddle_untouched_even_out_of_bounds():
    paddle = Paddle(-50.0)
    paddle.move(0.0, 1.0, 1000.0)
    assert paddle.x == -50.0


def test_window_narrower_than_paddle_raises():
    paddle = Paddle(10.0)
    with pytest.raises(ValueError):
        paddle.move(DIRECTION_FORWARD, 0.1, PADDLE_WIDTH / 2)