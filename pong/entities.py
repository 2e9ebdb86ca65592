from dataclasses import dataclass, field
from typing import Optional

import pygame
from pygame.math import Vector2

from .config import BALL_SIZE, PADDLE_H, PADDLE_W, WHITE


def centered_rect(center: Vector2, w: float, h: float) -> pygame.Rect:
    rect = pygame.Rect(0, 0, int(w), int(h))
    rect.center = (round(center.x), round(center.y))
    return rect


@dataclass
class Paddle:
    pos: Vector2

    def __post_init__(self):
        self.pos = Vector2(self.pos)

    @property
    def rect(self) -> pygame.Rect:
        return centered_rect(self.pos, PADDLE_W, PADDLE_H)

    def draw(self, surf):
        pygame.draw.rect(surf, WHITE, self.rect)


@dataclass
class Ball:
    pos: Vector2
    velocity: Vector2 = field(default_factory=lambda: Vector2(1, 1))

    def __post_init__(self):
        self.pos = Vector2(self.pos)
        self.velocity = Vector2(self.velocity)

    @property
    def rect(self) -> pygame.Rect:
        return centered_rect(self.pos, BALL_SIZE, BALL_SIZE)

    def normalize_velocity(self, fallback: Optional[Vector2] = None):
        # a zero vector has no direction; keep the fallback's instead
        if self.velocity.length_squared() == 0:
            self.velocity = Vector2(fallback if fallback is not None else (1, 1)).normalize()
        else:
            self.velocity = self.velocity.normalize()

    def draw(self, surf):
        pygame.draw.rect(surf, WHITE, self.rect)
