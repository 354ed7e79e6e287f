# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging
import random

from .config import (
    GRID_SIZE, FOOD_PLACEMENT_ATTEMPTS,
    INITIAL_SNAKE, INITIAL_DIRECTION,
    BASE_SPEED_MS, SPEED_STEP_MS, FOODS_PER_SPEEDUP, MIN_SPEED_MS,
    CFG,
)

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# Outcomes returned by step_game
MOVED = "moved"
ATE = "ate"
DIED = "died"
IDLE = "idle"

# ---------- Helpers ----------
def _random_cell(rng) -> Cell:
    return (rng.randrange(GRID_SIZE), rng.randrange(GRID_SIZE))

def spawn_food(snake: List[Cell], rng: Optional[random.Random] = None) -> Cell:
    """
    Pick a uniformly random cell that is not on the snake.

    Gives up after FOOD_PLACEMENT_ATTEMPTS resamples and returns the last
    sample, which may overlap the snake on a nearly full board.
    """
    rng = rng or random
    food = _random_cell(rng)
    attempts = 0
    while food in snake and attempts < FOOD_PLACEMENT_ATTEMPTS:
        food = _random_cell(rng)
        attempts += 1
    if food in snake:
        logger.warning("No free cell found after %d attempts, food placed on snake at %s",
                       attempts, food)
    return food

def is_opposite(a: Cell, b: Cell) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def in_bounds(cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Cell
    food: Cell
    score: int = 0
    high_score: int = 0            # session only, survives reset_game
    speed_ms: int = BASE_SPEED_MS
    running: bool = True
    allow_move: bool = False       # one direction change per step
    last_step_ms: int = 0          # timestamp of the last time-gate opening
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @property
    def head(self) -> Cell:
        return self.snake[0]

def new_game_state(rng: Optional[random.Random] = None) -> GameState:
    rng = rng or random.Random(CFG.seed)
    snake = list(INITIAL_SNAKE)
    return GameState(
        snake=snake,
        direction=INITIAL_DIRECTION,
        food=spawn_food(snake, rng),
        rng=rng,
    )

def reset_game(state: GameState) -> None:
    """Back to the opening position. Keeps high_score and last_step_ms."""
    state.snake = list(INITIAL_SNAKE)
    state.direction = INITIAL_DIRECTION
    state.food = spawn_food(state.snake, state.rng)
    state.score = 0
    state.speed_ms = BASE_SPEED_MS
    state.running = True
    state.allow_move = False

# ---------- Input / Update ----------
def request_direction(state: GameState, candidate: Cell) -> bool:
    """Turn the snake unless candidate reverses it. Closes the move gate on success."""
    if is_opposite(candidate, state.direction):
        return False
    state.direction = candidate
    state.allow_move = False
    return True

def _game_over(state: GameState) -> None:
    state.running = False
    if state.score > state.high_score:
        state.high_score = state.score
    logger.info("Game over: score=%d high_score=%d", state.score, state.high_score)

def step_game(state: GameState) -> str:
    """
    Advance the snake one cell.

    Collision is checked against the body before the tail moves, so running
    into the current tail cell is fatal. Returns MOVED, ATE, DIED, or IDLE
    when the game is already over.
    """
    if not state.running:
        return IDLE

    hx, hy = state.head
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)

    # Wall / self collision
    if not in_bounds(new_head) or new_head in state.snake:
        _game_over(state)
        return DIED

    state.snake.insert(0, new_head)

    if new_head != state.food:
        state.snake.pop()
        return MOVED

    # Grow: the tail stays for this step
    state.food = spawn_food(state.snake, state.rng)
    state.score += 1
    if state.score % FOODS_PER_SPEEDUP == 0:
        state.speed_ms = max(MIN_SPEED_MS, state.speed_ms - SPEED_STEP_MS)
    logger.debug("Ate food: score=%d speed_ms=%d next food at %s",
                 state.score, state.speed_ms, state.food)
    return ATE
