import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pytest

from pong_config import GameConfig
from pong_engine import Court
from pong_match import Match
from pong_scheduler import FrameScheduler


@pytest.fixture
def court():
    return Court(GameConfig(), np.random.default_rng(1234))


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def match(scheduler):
    return Match(GameConfig(), scheduler, seed=1234)
