import math
from dataclasses import dataclass
from enum import Enum

WIDTH, HEIGHT = 900, 600
WIN_SCORE = 10

PADDLE_W, PADDLE_H = 14, 95
PADDLE_SPEED = 6
PADDLE_MARGIN = 25

BALL_SIZE = 14
BALL_SPEED_START = 4.6
BALL_SPEED_BOOST = 0.28
MAX_BALL_SPEED = 11
MIN_BALL_SPEED_X = 2.2
DEFLECTION = 1.9
SERVE_ANGLE = math.pi / 6

FPS = 60
FONT_NAME = "arial"

WHITE = (240, 240, 240)
BG = (5, 8, 18)
DIM = (120, 120, 140)
ACCENT = (89, 208, 255)
LINE = (43, 61, 98)


class Mode(Enum):
    SINGLE = "single"
    TWO = "two"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class AIProfile:
    tracking_speed: float
    dead_zone: float


# Slower tracking and a wider dead zone make the computer easier to beat
AI_PROFILES = {
    Difficulty.EASY: AIProfile(tracking_speed=2.3, dead_zone=32),
    Difficulty.MEDIUM: AIProfile(tracking_speed=3.6, dead_zone=18),
    Difficulty.HARD: AIProfile(tracking_speed=5.2, dead_zone=8),
}


@dataclass
class GameConfig:
    width: int = WIDTH
    height: int = HEIGHT
    win_score: int = WIN_SCORE
    paddle_w: int = PADDLE_W
    paddle_h: int = PADDLE_H
    paddle_speed: float = PADDLE_SPEED
    paddle_margin: int = PADDLE_MARGIN
    ball_size: int = BALL_SIZE
    ball_speed_start: float = BALL_SPEED_START
    ball_speed_boost: float = BALL_SPEED_BOOST
    max_ball_speed: float = MAX_BALL_SPEED
    min_ball_speed_x: float = MIN_BALL_SPEED_X
    deflection: float = DEFLECTION
    serve_angle: float = SERVE_ANGLE

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"court must have a positive size, got {self.width}x{self.height}")
        if self.paddle_w <= 0 or self.paddle_h <= 0 or self.ball_size <= 0:
            raise ValueError("paddle and ball sizes must be positive")
        if self.paddle_h > self.height:
            raise ValueError(f"paddle height {self.paddle_h} does not fit a court of height {self.height}")
        if 2 * (self.paddle_margin + self.paddle_w) >= self.width:
            raise ValueError("paddles overlap; court too narrow for the paddle margin")
        if self.win_score < 1:
            raise ValueError(f"win score must be at least 1, got {self.win_score}")
        if self.min_ball_speed_x > self.max_ball_speed:
            raise ValueError("minimum horizontal ball speed exceeds the speed cap")
