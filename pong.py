import argparse
import logging
import sys

import pygame

from pong_config import (ACCENT, BG, DIM, FONT_NAME, FPS, LINE, WHITE, Difficulty,
                         GameConfig, Mode)
from pong_input import read_controls
from pong_match import Match, State
from pong_scheduler import FrameScheduler

logger = logging.getLogger(__name__)

DIFFICULTY_KEYS = {
    pygame.K_e: Difficulty.EASY,
    pygame.K_m: Difficulty.MEDIUM,
    pygame.K_h: Difficulty.HARD,
}
MODE_KEYS = {
    pygame.K_1: Mode.SINGLE,
    pygame.K_2: Mode.TWO,
}
CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)


def handle_key(match, key):
    """Apply one key press to the screen flow. Returns False when the app should quit."""
    if match.state is State.MENU:
        if key == pygame.K_ESCAPE:
            return False
        if key in MODE_KEYS:
            match.select_mode(MODE_KEYS[key])
        elif key in DIFFICULTY_KEYS:
            match.select_difficulty(DIFFICULTY_KEYS[key])
        elif key in CONFIRM_KEYS:
            match.start()
    elif match.state is State.PLAYING:
        if key == pygame.K_ESCAPE:
            match.back_to_menu()
    elif match.state is State.GAMEOVER:
        if key in CONFIRM_KEYS or key == pygame.K_r:
            match.play_again()
        elif key in (pygame.K_ESCAPE, pygame.K_m):
            match.back_to_menu()
    return True


def draw_center_dashed_line(surface, width, height):
    dash_h = 14
    gap = 14
    x = width // 2 - 2
    for y in range(8, height - 8, dash_h + gap):
        pygame.draw.rect(surface, LINE, (x, y, 4, dash_h))


def draw_court(surface, frame):
    draw_center_dashed_line(surface, frame['width'], frame['height'])
    for x, y, w, h in frame['paddles']:
        pygame.draw.rect(surface, ACCENT, pygame.Rect(round(x), round(y), w, h))
    ball = frame['ball']
    pygame.draw.circle(surface, WHITE, (round(ball['x']), round(ball['y'])), ball['size'] // 2)


def blit_centered(surface, text_surface, y):
    surface.blit(text_surface, (surface.get_width() // 2 - text_surface.get_width() // 2, y))


class PongApp:
    def __init__(self, match, fps=FPS):
        self.match = match
        self.fps = fps
        self.screen = pygame.display.set_mode((match.cfg.width, match.cfg.height))
        pygame.display.set_caption("Pong")
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.SysFont(FONT_NAME, 20)
        self.font_item = pygame.font.SysFont(FONT_NAME, 28)
        self.font_big = pygame.font.SysFont(FONT_NAME, 54, bold=True)

    def draw_menu(self):
        m = self.match
        blit_centered(self.screen, self.font_big.render("PONG", True, WHITE), 90)
        mode = "1: Single player   2: Two players"
        blit_centered(self.screen, self.font_item.render(mode, True, DIM), 210)
        chosen = "Player vs Computer" if m.mode is Mode.SINGLE else "Player 1 vs Player 2"
        blit_centered(self.screen, self.font_item.render(chosen, True, ACCENT), 250)
        if m.mode is Mode.SINGLE:
            levels = "   ".join(
                f"[{d.value.upper()}]" if d is m.difficulty else d.value
                for d in Difficulty
            )
            blit_centered(self.screen, self.font_item.render("E / M / H: " + levels, True, WHITE), 310)
        hint = "Enter: start | Esc: quit | W/S and Up/Down to move"
        blit_centered(self.screen, self.font_small.render(hint, True, DIM), self.screen.get_height() - 60)

    def draw_game(self):
        frame = self.match.court.snapshot()
        draw_court(self.screen, frame)
        left, right = frame['scores']
        score_text = self.font_big.render(f"{left}   {right}", True, WHITE)
        blit_centered(self.screen, score_text, 20)
        info = f"{self.match.left_name} vs {self.match.right_name} | first to {self.match.cfg.win_score} | Esc: menu"
        self.screen.blit(self.font_small.render(info, True, DIM), (20, self.screen.get_height() - 28))

    def draw_game_over(self):
        draw_court(self.screen, self.match.court.snapshot())
        blit_centered(self.screen, self.font_big.render(self.match.result.message, True, WHITE), 200)
        hint = "Enter: play again | Esc: menu"
        blit_centered(self.screen, self.font_item.render(hint, True, DIM), 300)

    def draw(self):
        self.screen.fill(BG)
        if self.match.state is State.MENU:
            self.draw_menu()
        elif self.match.state is State.PLAYING:
            self.draw_game()
        else:
            self.draw_game_over()
        pygame.display.flip()

    def run(self):
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN and not handle_key(self.match, event.key):
                    return

            self.match.scheduler.run_pending()
            self.draw()
            self.clock.tick(self.fps)


def game(mode=None, difficulty=None, fps=FPS, seed=None):
    pygame.init()
    try:
        match = Match(GameConfig(), FrameScheduler(), controls=read_controls, seed=seed)
        if mode is not None:
            match.select_mode(mode)
        if difficulty is not None:
            match.select_difficulty(difficulty)
        PongApp(match, fps=fps).run()
    finally:
        pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Two-paddle Pong: play the computer or a friend.")
    parser.add_argument("--mode", choices=[m.value for m in Mode], default=None)
    parser.add_argument("--difficulty", choices=[d.value for d in Difficulty], default=None)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Starting Pong at %d fps", args.fps)
    game(mode=args.mode, difficulty=args.difficulty, fps=args.fps, seed=args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
