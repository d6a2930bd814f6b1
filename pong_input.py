from dataclasses import dataclass

import pygame


@dataclass
class Controls:
    p1_up: bool = False
    p1_down: bool = False
    p2_up: bool = False
    p2_down: bool = False

    @staticmethod
    def intent(up, down):
        return int(down) - int(up)

    @property
    def left_intent(self):
        return self.intent(self.p1_up, self.p1_down)

    @property
    def right_intent(self):
        return self.intent(self.p2_up, self.p2_down)


# W/S for player 1, arrow keys for player 2
KEYMAP = {
    "p1_up": pygame.K_w,
    "p1_down": pygame.K_s,
    "p2_up": pygame.K_UP,
    "p2_down": pygame.K_DOWN,
}


def read_controls(pressed=None):
    if pressed is None:
        pressed = pygame.key.get_pressed()
    return Controls(**{name: bool(pressed[key]) for name, key in KEYMAP.items()})
