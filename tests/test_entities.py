import pytest
from pygame.math import Vector2

from pong.config import BALL_SIZE, PADDLE_H, PADDLE_W
from pong.entities import Ball, Paddle, centered_rect


class TestCenteredRect:
    def test_rect_is_centered_on_position(self):
        rect = centered_rect(Vector2(10, 300), 20, 100)

        assert rect.center == (10, 300)
        assert rect.size == (20, 100)


class TestPaddle:
    def test_accepts_tuple_position(self):
        paddle = Paddle((10, 300))

        assert isinstance(paddle.pos, Vector2)
        assert paddle.rect.size == (int(PADDLE_W), int(PADDLE_H))


class TestBall:
    def test_default_direction(self):
        """Ball starts heading down-right, not yet normalized."""
        ball = Ball(Vector2(400, 300))

        assert ball.velocity == Vector2(1, 1)
        assert ball.rect.width == int(BALL_SIZE)

    def test_normalize_velocity(self):
        ball = Ball(Vector2(0, 0), Vector2(3, 4))
        ball.normalize_velocity()

        assert ball.velocity.x == pytest.approx(0.6)
        assert ball.velocity.y == pytest.approx(0.8)

    def test_zero_velocity_uses_fallback(self):
        """A zero vector takes the fallback's direction instead of failing."""
        ball = Ball(Vector2(0, 0), Vector2(0, 0))
        ball.normalize_velocity(fallback=Vector2(0, -2))

        assert ball.velocity == Vector2(0, -1)
