from dataclasses import dataclass
from typing import Optional

# ----- Grid & window -----
GRID_SIZE = 25
CELL_SIZE = 20
OFFSET = 50  # margin around the playing area, holds the border and score text
WIDTH = HEIGHT = GRID_SIZE * CELL_SIZE + 2 * OFFSET

# Resamples allowed before spawn_food gives up and keeps the last sample
FOOD_PLACEMENT_ATTEMPTS = GRID_SIZE * GRID_SIZE

# ----- Colors -----
GREEN      = (0xAD, 0xD4, 0x62)
DARK_GREEN = (0x2B, 0x33, 0x1A)
RED        = (0xE7, 0x4C, 0x3C)
WHITE      = (255, 255, 255)
BLACK      = (0, 0, 0)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

INITIAL_SNAKE = ((6, 9), (5, 9))
INITIAL_DIRECTION = RIGHT

# ----- Speed ramp (fixed, not a difficulty setting) -----
BASE_SPEED_MS = 200
SPEED_STEP_MS = 10
FOODS_PER_SPEEDUP = 2
MIN_SPEED_MS = 60

# ----- Tunables (set from the command line) -----
@dataclass
class Config:
    seed: Optional[int] = None
    fps: int = 60
    sound: bool = True

CFG = Config()
