"""
Position entity - an integer cell on the wraparound grid.
"""

from typing import NamedTuple

from .direction import Direction


class Position(NamedTuple):
    """A grid cell. Compares and hashes by value, unpacks as (x, y)."""

    x: int
    y: int

    def advance(self, direction: Direction, grid_size: int) -> "Position":
        return advance(self, direction, grid_size)


def advance(pos: Position, direction: Direction, grid_size: int) -> Position:
    """
    Move one cell in `direction`, wrapping at the edges.

    Stepping past 0 lands on grid_size - 1 and stepping past
    grid_size - 1 lands on 0. grid_size must be positive.
    """
    dx, dy = Direction(direction).delta
    x, y = pos
    return Position((x + dx) % grid_size, (y + dy) % grid_size)
