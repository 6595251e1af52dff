"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
presentation concerns (window, keyboard, drawing).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    GRID_SIZE, BASE_SPEED, SPEED_DECREMENT, MIN_SPEED,
)
from .direction import Direction, opposite
from .position import Position, advance
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'GRID_SIZE', 'BASE_SPEED', 'SPEED_DECREMENT', 'MIN_SPEED',
    'Direction', 'opposite',
    'Position', 'advance',
    'Snake',
    'GameState',
]
