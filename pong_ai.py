import math

from pong_config import AI_PROFILES, Difficulty


def cpu_policy(ball_y, paddle, profile):
    # Simple tracking: chase the ball's height, ignore small misses
    delta = ball_y - paddle.center_y
    if abs(delta) <= profile.dead_zone:
        return 0.0
    return math.copysign(profile.tracking_speed, delta)


def profile_for(difficulty):
    return AI_PROFILES[Difficulty(difficulty)]
