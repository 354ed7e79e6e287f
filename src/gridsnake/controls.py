# controls.py
from __future__ import annotations
from typing import Optional

import pygame # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import request_direction
from .scheduler import FrameScheduler

# Symbolic keys understood by handle_key
KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_RESTART = "up", "down", "left", "right", "restart"

DIRECTION_KEYS = {
    KEY_UP: UP,
    KEY_DOWN: DOWN,
    KEY_LEFT: LEFT,
    KEY_RIGHT: RIGHT,
}

PYGAME_KEYS = {
    pygame.K_UP: KEY_UP,       pygame.K_w: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,   pygame.K_s: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,   pygame.K_a: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT, pygame.K_d: KEY_RIGHT,
    pygame.K_SPACE: KEY_RESTART,
}


def key_from_pygame(key: int) -> Optional[str]:
    return PYGAME_KEYS.get(key)


def handle_key(scheduler: FrameScheduler, key: Optional[str]) -> bool:
    """
    Apply one key press. Returns True if it changed anything.

    While the game runs, at most one turn is accepted between two steps.
    Restart only works once the game is over.
    """
    state = scheduler.state
    if state.running and not state.allow_move:
        return False

    if key == KEY_RESTART:
        if state.running:
            return False
        scheduler.restart()
        return True

    cand = DIRECTION_KEYS.get(key)
    if cand is None or not state.running:
        return False
    return request_direction(state, cand)
