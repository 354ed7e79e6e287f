# render.py
from __future__ import annotations
from typing import Sequence, Tuple

import pygame # type: ignore

from .config import (
    GRID_SIZE, CELL_SIZE, OFFSET, WIDTH, HEIGHT,
    GREEN, DARK_GREEN, RED, WHITE, BLACK,
)

Cell = Tuple[int, int]

BORDER = 5
SEGMENT_RADIUS = 8
EYE_RADIUS = 3
EYE_INSET = 5

# ---------- Helpers ----------
def cell_origin(gx: int, gy: int) -> Tuple[int, int]:
    """Top-left pixel of a grid cell."""
    return OFFSET + gx * CELL_SIZE, OFFSET + gy * CELL_SIZE

def eye_positions(head_px: Tuple[int, int], direction: Cell) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """Both eye centres, placed on the side of the head facing direction."""
    x, y = head_px
    near, far = EYE_INSET, CELL_SIZE - EYE_INSET
    dx, dy = direction
    if dx == 1:
        return (x + far, y + near), (x + far, y + far)
    if dx == -1:
        return (x + near, y + near), (x + near, y + far)
    if dy == -1:
        return (x + near, y + near), (x + far, y + near)
    return (x + near, y + far), (x + far, y + far)

def draw_board(surface: pygame.Surface, snake: Sequence[Cell], food: Cell, direction: Cell) -> None:
    surface.fill(GREEN)

    # border just outside the playing area
    side = CELL_SIZE * GRID_SIZE + 2 * BORDER
    pygame.draw.rect(surface, DARK_GREEN, pygame.Rect(OFFSET - BORDER, OFFSET - BORDER, side, side), BORDER)

    # food
    pygame.draw.rect(surface, RED, pygame.Rect(*cell_origin(*food), CELL_SIZE, CELL_SIZE))

    # snake
    for i, (gx, gy) in enumerate(snake):
        px, py = cell_origin(gx, gy)
        rect = pygame.Rect(px, py, CELL_SIZE, CELL_SIZE)
        pygame.draw.rect(surface, DARK_GREEN, rect, border_radius=SEGMENT_RADIUS)
        if i == 0:
            for eye in eye_positions((px, py), direction):
                pygame.draw.circle(surface, WHITE, eye, EYE_RADIUS)
                pygame.draw.circle(surface, BLACK, eye, EYE_RADIUS - 1)


class PygameView:
    """Draws the board plus the score line. Serves as both Renderer and ScoreDisplay."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        self.surface = surface
        self.font = font
        self.score = 0
        self.high_score = 0
        self.game_over = False

    # ScoreDisplay
    def set_score(self, score: int) -> None:
        self.score = score

    def set_high_score(self, high_score: int) -> None:
        self.high_score = high_score

    def show_game_over(self, visible: bool) -> None:
        self.game_over = visible

    # Renderer
    def draw_frame(self, snake: Sequence[Cell], food: Cell, direction: Cell) -> None:
        draw_board(self.surface, snake, food, direction)

        score = self.font.render(f"Score: {self.score}", True, DARK_GREEN)
        best = self.font.render(f"High Score: {self.high_score}", True, DARK_GREEN)
        self.surface.blit(score, (OFFSET - BORDER, (OFFSET - BORDER - score.get_height()) // 2))
        self.surface.blit(best, best.get_rect(topright=(WIDTH - OFFSET + BORDER, (OFFSET - BORDER - best.get_height()) // 2)))

        if self.game_over:
            self._draw_game_over()

    def _draw_game_over(self) -> None:
        overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        self.surface.blit(overlay, (0, 0))

        title = self.font.render("GAME OVER", True, (240, 240, 250))
        sub   = self.font.render("Press Space to restart", True, (220, 220, 230))
        self.surface.blit(title, title.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 16)))
        self.surface.blit(sub, sub.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 16)))
