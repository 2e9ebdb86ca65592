from dataclasses import dataclass

# --- Config ---
WIDTH, HEIGHT = 800, 600
FPS = 60
TITLE = "Pong"

PADDLE_W, PADDLE_H = 20.0, 100.0
PADDLE_HALF_W, PADDLE_HALF_H = PADDLE_W * 0.5, PADDLE_H * 0.5
BALL_SIZE = 15.0
BALL_HALF_SIZE = BALL_SIZE * 0.5

PLAYER_SPEED = 500.0
BALL_SPEED = 250.0

# reset_ball drops the ball somewhere in this fraction of the arena
RESET_MIN, RESET_MAX = 0.3, 0.6

SCORE_Y = 5

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


@dataclass(frozen=True)
class Rules:
    # x is updated before y is computed from it when rotating the ball
    sequential_rotation: bool = True
    # paddles also require the ball inside their vertical band to bounce it
    paddle_overlap: bool = False
    # right paddle bounces the ball too; off, every ball reaching it scores for P1
    right_paddle_bounce: bool = False
    # ball position readout in the top-left corner
    show_ball_pos: bool = True
