from collections import defaultdict

import pygame

from pong_input import Controls, read_controls


def pressed(*keys):
    state = defaultdict(bool)
    for key in keys:
        state[key] = True
    return state


def test_read_controls_maps_keys():
    controls = read_controls(pressed(pygame.K_w, pygame.K_DOWN))
    assert controls == Controls(p1_up=True, p2_down=True)
    assert controls.left_intent == -1
    assert controls.right_intent == 1


def test_no_keys_means_no_intent():
    controls = read_controls(pressed())
    assert controls.left_intent == 0
    assert controls.right_intent == 0


def test_opposite_keys_cancel_out():
    controls = read_controls(pressed(pygame.K_w, pygame.K_s, pygame.K_UP, pygame.K_DOWN))
    assert controls.left_intent == 0
    assert controls.right_intent == 0
