"""
GameState entity - a read-only snapshot of the game handed to the
presentation shell once per frame.
"""

from dataclasses import dataclass
from typing import Tuple

from .direction import Direction
from .position import Position


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        snake_positions: segments from head to tail
        food: the food cell
        score: current score
        game_over: whether the session has ended
        width, height: board dimensions
        speed: seconds per discrete step
        direction: current heading of the snake
    """

    snake_positions: Tuple[Position, ...]
    food: Position
    score: int
    game_over: bool
    width: int
    height: int
    speed: float
    direction: Direction

    @property
    def head(self) -> Position:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Rows are printed top to bottom (y = 0 first), matching the window.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.food
        board[fy][fx] = 'F'

        # Body first so the head wins if it ever shares a cell
        for x, y in self.snake_positions[1:]:
            board[y][x] = 'S'
        hx, hy = self.head
        board[hy][hx] = 'H'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState score={self.score}, food={tuple(self.food)}, "
            f"length={len(self.snake_positions)}, game_over={self.game_over}>"
        )
