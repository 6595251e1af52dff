"""
Tests for the pygame renderer, drawn onto an off-screen surface.
"""

import os
import sys

import pygame
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.direction import Direction  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from domain.position import Position  # noqa: E402
from presentation.renderer import (  # noqa: E402
    BACKGROUND,
    FOOD_COLOR,
    Renderer,
    SCORE_COLOR,
    SNAKE_COLOR,
)

CELL = 10


def make_state(score=0, game_over=False):
    return GameState(
        snake_positions=(Position(5, 5), Position(4, 5)),
        food=Position(8, 8),
        score=score,
        game_over=game_over,
        width=10,
        height=10,
        speed=0.1,
        direction=Direction.RIGHT,
    )


@pytest.fixture
def renderer():
    surface = pygame.Surface((10 * CELL, 10 * CELL))
    return Renderer(surface, cell_size=CELL)


def color_at(renderer, x, y):
    return tuple(renderer.surface.get_at((x, y)))[:3]


def test_draws_snake_food_and_background(renderer):
    renderer.draw(make_state())

    assert color_at(renderer, 5 * CELL + 1, 5 * CELL + 1) == SNAKE_COLOR
    assert color_at(renderer, 4 * CELL + 1, 5 * CELL + 1) == SNAKE_COLOR
    assert color_at(renderer, 8 * CELL + 1, 8 * CELL + 1) == FOOD_COLOR
    assert color_at(renderer, 2 * CELL + 1, 8 * CELL + 1) == BACKGROUND


def test_draws_one_block_per_point(renderer):
    renderer.draw(make_state(score=2))

    assert color_at(renderer, 11, 11) == SCORE_COLOR
    assert color_at(renderer, 26, 11) == SCORE_COLOR
    assert color_at(renderer, 41, 11) == BACKGROUND


def test_game_over_tints_the_board(renderer):
    renderer.draw(make_state(game_over=True))

    r, g, b = color_at(renderer, 2 * CELL + 1, 8 * CELL + 1)
    assert r > 0
    assert (g, b) == (0, 0)
