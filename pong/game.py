import logging
import math
import random
from typing import Optional

import pygame
from pygame.math import Vector2

from .config import (
    BALL_HALF_SIZE,
    BALL_SPEED,
    BLACK,
    PADDLE_HALF_H,
    PADDLE_HALF_W,
    PLAYER_SPEED,
    RESET_MAX,
    RESET_MIN,
    SCORE_Y,
    WHITE,
    Rules,
)
from .entities import Ball, Paddle

logger = logging.getLogger(__name__)


class GameState:
    def __init__(self, size, rng: Optional[random.Random] = None, rules: Optional[Rules] = None):
        w, h = size
        self.screen_borders = (float(w), float(h))
        self.rng = rng if rng is not None else random.Random()
        self.rules = rules if rules is not None else Rules()

        self.p1 = Paddle(Vector2(PADDLE_HALF_W, h * 0.5))
        self.p2 = Paddle(Vector2(w - PADDLE_HALF_W, h * 0.5))
        self.ball = Ball(Vector2(w * 0.5, h * 0.5), Vector2(1, 1))

        self.p1_score = 0
        self.p2_score = 0

    @staticmethod
    def clamp(value: float, lo: float, hi: float) -> float:
        if value < lo:
            return lo
        if value > hi:
            return hi
        return value

    def reset_ball(self):
        w, h = self.screen_borders
        v = self.ball.velocity
        before = Vector2(v)
        theta = self.rng.random() * 2.0 * math.pi
        c, s = math.cos(theta), math.sin(theta)

        if self.rules.sequential_rotation:
            v.x = c * v.x - s * v.y
            v.y = s * v.x + c * v.y
        else:
            v.x, v.y = c * v.x - s * v.y, s * v.x + c * v.y

        self.ball.normalize_velocity(fallback=before)

        self.ball.pos.x = self.rng.uniform(w * RESET_MIN, w * RESET_MAX)
        self.ball.pos.y = self.rng.uniform(h * RESET_MIN, h * RESET_MAX)
        logger.debug("ball reset to (%.1f, %.1f) heading (%.3f, %.3f)",
                     self.ball.pos.x, self.ball.pos.y,
                     self.ball.velocity.x, self.ball.velocity.y)

    def handle_input(self, keys, delta: float):
        if keys[pygame.K_r]:
            self.reset_ball()

        if keys[pygame.K_w]:
            self.p1.pos.y -= delta * PLAYER_SPEED
        if keys[pygame.K_s]:
            self.p1.pos.y += delta * PLAYER_SPEED

        hi = self.screen_borders[1] - PADDLE_HALF_H
        self.p1.pos.y = self.clamp(self.p1.pos.y, PADDLE_HALF_H, hi)
        self.p2.pos.y = self.clamp(self.p2.pos.y, PADDLE_HALF_H, hi)

    def _hits(self, paddle: Paddle) -> bool:
        ball = self.ball.pos
        if not paddle.pos.x - PADDLE_HALF_W < ball.x < paddle.pos.x + PADDLE_HALF_W:
            return False
        if self.rules.paddle_overlap:
            return abs(ball.y - paddle.pos.y) < PADDLE_HALF_H
        return True

    def check_winner(self):
        if self.ball.pos.x <= 0:
            self.reset_ball()
            self.p2_score += 1
            logger.info("P2 scores (%d - %d)", self.p1_score, self.p2_score)

        if self.ball.pos.x >= self.screen_borders[0]:
            self.reset_ball()
            self.p1_score += 1
            logger.info("P1 scores (%d - %d)", self.p1_score, self.p2_score)

    def move_ball(self, delta: float):
        ball = self.ball
        ball.pos += ball.velocity * BALL_SPEED * delta

        h = self.screen_borders[1]
        if ball.pos.y >= h - BALL_HALF_SIZE or ball.pos.y <= BALL_HALF_SIZE:
            ball.velocity.y *= -1

        if self._hits(self.p1) or (self.rules.right_paddle_bounce and self._hits(self.p2)):
            ball.velocity.x *= -1

        self.check_winner()

    def update(self, delta: float, keys):
        self.handle_input(keys, delta)
        self.move_ball(delta)

    def render(self, surface, font):
        surface.fill(BLACK)

        self.p1.draw(surface)
        self.p2.draw(surface)
        self.ball.draw(surface)

        if self.rules.show_ball_pos:
            ball_pos = font.render(f"{self.ball.pos.x}, {self.ball.pos.y}", True, WHITE)
            surface.blit(ball_pos, (0, 0))

        score_text = font.render(f"P1: {self.p1_score}  --  P2: {self.p2_score}", True, WHITE)
        surface.blit(score_text, (self.screen_borders[0] * 0.5 - score_text.get_width() * 0.5, SCORE_Y))
