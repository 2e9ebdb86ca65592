from .config import Rules
from .entities import Ball, Paddle
from .game import GameState

__all__ = [
    "Ball",
    "GameState",
    "Paddle",
    "Rules",
]
