import logging
from dataclasses import dataclass
from enum import Enum

import numpy as np

from pong_ai import cpu_policy, profile_for
from pong_config import Difficulty, GameConfig, Mode
from pong_engine import Court, Side
from pong_input import Controls
from pong_scheduler import FrameScheduler

logger = logging.getLogger(__name__)


class State(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAMEOVER = "gameover"


@dataclass
class MatchResult:
    winner: Side
    winner_name: str
    left: int
    right: int

    @property
    def message(self):
        return f"{self.winner_name} wins {self.left} - {self.right}"


class Match:
    """
    One Pong session: owns the court, the score and the tick loop.

    The loop is a chain of scheduler requests, one per frame. Only one request
    is ever outstanding; start() and back_to_menu() cancel it first so two
    loops never drive the same court.
    """

    def __init__(self, cfg=None, scheduler=None, controls=None, seed=None, rng=None):
        self.cfg = cfg or GameConfig()
        self.scheduler = scheduler or FrameScheduler()
        self.controls = controls or Controls
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.court = Court(self.cfg, self.rng)

        self.state = State.MENU
        self.mode = Mode.SINGLE
        self.difficulty = Difficulty.EASY
        self.result = None

        self.score_listeners = []
        self.result_listeners = []
        self._handle = None

    # --- menu selections ---
    def select_mode(self, mode):
        if self.state is not State.MENU:
            logger.debug("Ignoring mode change to %s while %s", mode, self.state.value)
            return False
        self.mode = Mode(mode)
        return True

    def select_difficulty(self, difficulty):
        if self.state is not State.MENU:
            logger.debug("Ignoring difficulty change to %s while %s", difficulty, self.state.value)
            return False
        self.difficulty = Difficulty(difficulty)
        return True

    @property
    def left_name(self):
        return "Player 1"

    @property
    def right_name(self):
        return "Computer" if self.mode is Mode.SINGLE else "Player 2"

    # --- transitions ---
    def start(self, mode=None, difficulty=None):
        if mode is not None:
            self.mode = Mode(mode)
        if difficulty is not None:
            self.difficulty = Difficulty(difficulty)

        self._stop_loop()
        self.court.reset()
        self.result = None
        self.state = State.PLAYING
        self._notify_score()
        logger.info("Match started: mode=%s difficulty=%s", self.mode.value, self.difficulty.value)
        self._schedule()

    def play_again(self):
        self.start()

    def back_to_menu(self):
        self._stop_loop()
        self.state = State.MENU
        self.result = None
        logger.info("Back to menu")

    # --- simulation ---
    def tick(self):
        if self.state is not State.PLAYING:
            return None

        court = self.court
        controls = self.controls()
        left_dy = controls.left_intent * court.left.speed
        if self.mode is Mode.TWO:
            right_dy = controls.right_intent * court.right.speed
        else:
            right_dy = cpu_policy(court.ball.y, court.right, profile_for(self.difficulty))
        court.move_paddles(left_dy, right_dy)

        scorer = court.step()
        if scorer is not None:
            self._notify_score()
            if not self._check_game_over():
                # Serve toward the side that just scored
                court.serve(1 if scorer is Side.RIGHT else -1)
        return scorer

    def _check_game_over(self):
        score = self.court.score
        if score.left < self.cfg.win_score and score.right < self.cfg.win_score:
            return False

        self._stop_loop()
        self.state = State.GAMEOVER
        winner = Side.LEFT if score.left > score.right else Side.RIGHT
        name = self.left_name if winner is Side.LEFT else self.right_name
        self.result = MatchResult(winner, name, score.left, score.right)
        logger.info(self.result.message)
        for listener in self.result_listeners:
            listener(self.result)
        return True

    def _notify_score(self):
        for listener in self.score_listeners:
            listener(self.court.score.left, self.court.score.right)

    # --- loop ---
    @property
    def running(self):
        return self._handle is not None and self._handle.active

    def _on_frame(self):
        self._handle = None
        self.tick()
        if self.state is State.PLAYING:
            self._schedule()

    def _schedule(self):
        self._stop_loop()
        self._handle = self.scheduler.request(self._on_frame)

    def _stop_loop(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
