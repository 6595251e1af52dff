"""
Snake entity for the game engine.
"""

from collections import deque
from itertools import islice
from typing import Iterable, Iterator, Tuple

from .position import Position


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Position from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(Position(*p) for p in positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    def hits_body(self, cell: Position) -> bool:
        """True if `cell` is occupied by any segment other than the head."""
        return cell in islice(self.positions, 1, None)

    def occupies(self, cell: Position) -> bool:
        return cell in self.positions

    def move_to(self, new_head: Position, grow: bool = False) -> None:
        """Prepend the new head; drop the tail unless growing."""
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()

    def segments(self) -> Tuple[Position, ...]:
        return tuple(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __repr__(self):
        return f"<Snake head={tuple(self.head)} length={len(self)}>"
