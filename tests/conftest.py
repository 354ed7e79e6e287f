import os

# headless pygame for the render/audio tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from gridsnake.game import new_game_state
from gridsnake.scheduler import FrameScheduler


class RecordingView:
    """Fake Renderer + ScoreDisplay that remembers every call."""

    def __init__(self):
        self.frames = []
        self.scores = []
        self.high_scores = []
        self.game_over = []

    def draw_frame(self, snake, food, direction):
        self.frames.append((list(snake), food, direction))

    def set_score(self, score):
        self.scores.append(score)

    def set_high_score(self, high_score):
        self.high_scores.append(high_score)

    def show_game_over(self, visible):
        self.game_over.append(visible)


class RecordingSounds:
    def __init__(self):
        self.played = []

    def play_eat(self):
        self.played.append("eat")

    def play_game_over(self):
        self.played.append("game_over")


@pytest.fixture
def state():
    s = new_game_state(random.Random(1234))
    # keep food out of the way unless a test puts it somewhere
    s.food = (0, 0)
    return s


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def sounds():
    return RecordingSounds()


@pytest.fixture
def scheduler(state, view, sounds):
    return FrameScheduler(state, view, view, sounds)
