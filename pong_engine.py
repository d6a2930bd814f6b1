"""
Court simulation: paddles, ball, collisions and scoring.

No pygame dependency, so the whole game can be stepped headless (tests do).
One call to Court.step() is one tick; velocities are in pixels per tick.
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from pong_config import GameConfig

logger = logging.getLogger(__name__)


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


def clamp(value, lo, hi):
    return max(lo, min(hi, value))


@dataclass
class Paddle:
    x: float
    y: float
    width: float
    height: float
    speed: float

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    @property
    def center_y(self):
        return self.y + self.height / 2

    def move(self, dy, court_height):
        self.y = clamp(self.y + dy, 0, court_height - self.height)

    def recenter(self, court_height):
        self.y = court_height / 2 - self.height / 2


@dataclass
class Ball:
    # (x, y) is the centre of the ball
    x: float
    y: float
    vx: float
    vy: float
    size: float

    @property
    def left(self):
        return self.x - self.size / 2

    @property
    def right(self):
        return self.x + self.size / 2

    @property
    def top(self):
        return self.y - self.size / 2

    @property
    def bottom(self):
        return self.y + self.size / 2

    @property
    def speed(self):
        return math.hypot(self.vx, self.vy)

    def overlaps(self, paddle):
        return (self.right >= paddle.x and self.left <= paddle.right
                and self.bottom >= paddle.y and self.top <= paddle.bottom)


@dataclass
class Score:
    left: int = 0
    right: int = 0

    def reset(self):
        self.left = 0
        self.right = 0

    def add(self, side):
        if side is Side.LEFT:
            self.left += 1
        else:
            self.right += 1


class Court:
    def __init__(self, cfg=None, rng=None):
        self.cfg = cfg or GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.W, self.H = self.cfg.width, self.cfg.height

        self.left = Paddle(self.cfg.paddle_margin, 0, self.cfg.paddle_w, self.cfg.paddle_h, self.cfg.paddle_speed)
        self.right = Paddle(self.W - self.cfg.paddle_margin - self.cfg.paddle_w, 0,
                            self.cfg.paddle_w, self.cfg.paddle_h, self.cfg.paddle_speed)
        self.ball = Ball(self.W / 2, self.H / 2, 0.0, 0.0, self.cfg.ball_size)
        self.score = Score()
        self.left.recenter(self.H)
        self.right.recenter(self.H)

    def reset(self):
        self.score.reset()
        self.left.recenter(self.H)
        self.right.recenter(self.H)
        self.serve(1 if self.rng.random() > 0.5 else -1)

    def serve(self, direction):
        angle = float(self.rng.uniform(-self.cfg.serve_angle, self.cfg.serve_angle))
        self.ball.x = self.W / 2
        self.ball.y = self.H / 2
        self.ball.vx = math.cos(angle) * self.cfg.ball_speed_start * direction
        self.ball.vy = math.sin(angle) * self.cfg.ball_speed_start

    def move_paddles(self, left_dy, right_dy):
        self.left.move(left_dy, self.H)
        self.right.move(right_dy, self.H)

    def step(self):
        """Advance the ball one tick. Returns the side that scored, or None."""
        ball = self.ball
        ball.x += ball.vx
        ball.y += ball.vy

        self.collide_walls()
        self.collide_paddle(self.left)
        self.collide_paddle(self.right)

        scorer = self.check_goal()
        if scorer is not None:
            self.score.add(scorer)
            logger.debug("%s scores, %d - %d", scorer.value, self.score.left, self.score.right)
        return scorer

    def collide_walls(self):
        ball = self.ball
        if ball.top <= 0:
            ball.y = ball.size / 2
            ball.vy = abs(ball.vy)
        elif ball.bottom >= self.H:
            ball.y = self.H - ball.size / 2
            ball.vy = -abs(ball.vy)

    def collide_paddle(self, paddle):
        ball = self.ball
        if not ball.overlaps(paddle):
            return False

        # Push the ball out so it cannot stick inside the paddle
        if ball.vx < 0:
            ball.x = paddle.right + ball.size / 2
        else:
            ball.x = paddle.x - ball.size / 2

        # Edge hits come back steeper than centre hits
        rel = (ball.y - paddle.center_y) / (paddle.height / 2)
        rel = clamp(rel, -1.0, 1.0)
        ball.vx = -ball.vx
        ball.vy += rel * self.cfg.deflection

        # Speed up, keeping the new bounce angle
        speed = min(ball.speed + self.cfg.ball_speed_boost, self.cfg.max_ball_speed)
        angle = math.atan2(ball.vy, ball.vx)
        ball.vx = math.cos(angle) * speed
        ball.vy = math.sin(angle) * speed

        floor = self.cfg.min_ball_speed_x
        if abs(ball.vx) < floor:
            ball.vx = math.copysign(floor, ball.vx)
            cap = self.cfg.max_ball_speed
            if ball.speed > cap:
                ball.vy = math.copysign(math.sqrt(cap * cap - floor * floor), ball.vy)
        return True

    def check_goal(self):
        if self.ball.right < 0:
            return Side.RIGHT
        if self.ball.left > self.W:
            return Side.LEFT
        return None

    def snapshot(self):
        return {
            'width': self.W,
            'height': self.H,
            'paddles': [(p.x, p.y, p.width, p.height) for p in (self.left, self.right)],
            'ball': {'x': self.ball.x, 'y': self.ball.y, 'size': self.ball.size},
            'scores': [self.score.left, self.score.right],
        }
