"""
Direction entity - the four compass moves and their opposites.
"""

from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """
    One of the four moves. Values are the plain move strings so a
    Direction compares equal to "UP", "DOWN", "LEFT" and "RIGHT".
    """

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def opposite(self) -> "Direction":
        """Return the direction that would reverse onto the snake's neck."""
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy) in screen coordinates, so UP decreases y."""
        return _DELTAS[self]

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        try:
            return cls(name.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown direction: {name!r}") from None

    def __str__(self) -> str:
        return self.value


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def opposite(direction: Direction) -> Direction:
    return Direction(direction).opposite
