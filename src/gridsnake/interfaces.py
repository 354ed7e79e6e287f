# interfaces.py
"""Collaborators the scheduler drives. Anything with matching methods will do."""
from __future__ import annotations
from typing import Protocol, Sequence, Tuple

Cell = Tuple[int, int]


class Renderer(Protocol):
    def draw_frame(self, snake: Sequence[Cell], food: Cell, direction: Cell) -> None: ...


class ScoreDisplay(Protocol):
    def set_score(self, score: int) -> None: ...

    def set_high_score(self, high_score: int) -> None: ...

    def show_game_over(self, visible: bool) -> None: ...


class SoundEffects(Protocol):
    def play_eat(self) -> None: ...

    def play_game_over(self) -> None: ...
