from __future__ import annotations

import pygame
import pytest

from gridsnake.config import CELL_SIZE, OFFSET, WIDTH, HEIGHT, GREEN, DARK_GREEN, RED, UP, DOWN, LEFT, RIGHT
from gridsnake.render import PygameView, cell_origin, draw_board, eye_positions


def _center(cell):
    x, y = cell_origin(*cell)
    return x + CELL_SIZE // 2, y + CELL_SIZE // 2


def _rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


@pytest.fixture
def surface():
    return pygame.Surface((WIDTH, HEIGHT))


@pytest.fixture
def font():
    pygame.font.init()
    yield pygame.font.SysFont(None, 24)


def test_cell_origin_includes_margin() -> None:
    assert cell_origin(0, 0) == (OFFSET, OFFSET)
    assert cell_origin(3, 2) == (OFFSET + 3 * CELL_SIZE, OFFSET + 2 * CELL_SIZE)


@pytest.mark.parametrize(
    "direction, expected",
    [
        (RIGHT, ((15, 5), (15, 15))),
        (LEFT, ((5, 5), (5, 15))),
        (UP, ((5, 5), (15, 5))),
        (DOWN, ((5, 15), (15, 15))),
    ],
)
def test_eyes_face_direction(direction, expected) -> None:
    assert eye_positions((0, 0), direction) == expected


def test_draw_board_colors(surface) -> None:
    draw_board(surface, [(6, 9), (5, 9)], (12, 3), RIGHT)
    assert _rgb(surface, (2, 2)) == GREEN
    assert _rgb(surface, _center((12, 3))) == RED
    assert _rgb(surface, _center((5, 9))) == DARK_GREEN
    # border sits just outside the top-left cell
    assert _rgb(surface, (OFFSET - 3, OFFSET - 3)) == DARK_GREEN
    assert _rgb(surface, _center((0, 0))) == GREEN


def test_view_tracks_scores_and_dims_on_game_over(surface, font) -> None:
    view = PygameView(surface, font)
    view.set_score(4)
    view.set_high_score(11)
    view.draw_frame([(6, 9), (5, 9)], (12, 3), RIGHT)
    corner = (2, HEIGHT - 2)
    assert _rgb(surface, corner) == GREEN

    view.show_game_over(True)
    view.draw_frame([(6, 9), (5, 9)], (12, 3), RIGHT)
    assert (view.score, view.high_score, view.game_over) == (4, 11, True)
    assert sum(_rgb(surface, corner)) < sum(GREEN)
