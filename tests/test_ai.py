import pytest

from pong_ai import cpu_policy, profile_for
from pong_config import AI_PROFILES, Difficulty
from pong_engine import Paddle


def paddle_centered_at(y):
    return Paddle(x=861, y=y - 47.5, width=14, height=95, speed=6)


def test_medium_ignores_ball_inside_dead_zone():
    paddle = paddle_centered_at(300)
    profile = profile_for("medium")
    assert profile.dead_zone == 18
    assert cpu_policy(310, paddle, profile) == 0
    assert cpu_policy(290, paddle, profile) == 0
    assert cpu_policy(318, paddle, profile) == 0


def test_medium_tracks_ball_outside_dead_zone():
    paddle = paddle_centered_at(300)
    profile = profile_for(Difficulty.MEDIUM)
    assert cpu_policy(325, paddle, profile) == pytest.approx(3.6)
    assert cpu_policy(275, paddle, profile) == pytest.approx(-3.6)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_each_profile_moves_by_its_tracking_speed(difficulty):
    profile = AI_PROFILES[difficulty]
    paddle = paddle_centered_at(300)
    assert cpu_policy(300 + profile.dead_zone + 1, paddle, profile) == profile.tracking_speed
    assert cpu_policy(300 + profile.dead_zone, paddle, profile) == 0


def test_harder_profiles_are_faster_and_tighter():
    easy, medium, hard = (AI_PROFILES[d] for d in (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD))
    assert easy.tracking_speed < medium.tracking_speed < hard.tracking_speed
    assert easy.dead_zone > medium.dead_zone > hard.dead_zone


def test_unknown_difficulty_is_rejected():
    with pytest.raises(ValueError):
        profile_for("impossible")
