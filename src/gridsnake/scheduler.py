# scheduler.py
from __future__ import annotations
import logging

from .game import GameState, step_game, reset_game, ATE, DIED
from .interfaces import Renderer, ScoreDisplay, SoundEffects

logger = logging.getLogger(__name__)


class FrameScheduler:
    """
    Called once per rendered frame. Steps the game at most once per
    state.speed_ms and redraws every time, so the frame rate and the
    simulation rate stay independent.
    """

    def __init__(
        self,
        state: GameState,
        renderer: Renderer,
        score_display: ScoreDisplay,
        sounds: SoundEffects,
    ) -> None:
        self.state = state
        self.renderer = renderer
        self.score_display = score_display
        self.sounds = sounds

    def tick(self, now_ms: int) -> bool:
        """Run one frame at host time now_ms. Returns True if the time gate opened."""
        state = self.state
        stepped = False

        if now_ms - state.last_step_ms >= state.speed_ms:
            state.allow_move = True
            if state.running:
                self._dispatch(step_game(state))
            state.last_step_ms = now_ms
            stepped = True

        self.renderer.draw_frame(state.snake, state.food, state.direction)
        return stepped

    def restart(self) -> None:
        reset_game(self.state)
        self.score_display.set_score(self.state.score)
        self.score_display.show_game_over(False)
        logger.info("New game started")

    def _dispatch(self, outcome: str) -> None:
        state = self.state
        if outcome == ATE:
            self.score_display.set_score(state.score)
            self.sounds.play_eat()
        elif outcome == DIED:
            self.score_display.set_high_score(state.high_score)
            self.score_display.show_game_over(True)
            self.sounds.play_game_over()
