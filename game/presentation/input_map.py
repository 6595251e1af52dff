"""
Keyboard to engine command mapping.
"""

from dataclasses import dataclass
from typing import Optional

import pygame

from domain.direction import Direction


@dataclass(frozen=True)
class Command:
    """
    One engine command produced by a key press.

    kind is "move", "reset" or "quit"; direction is set only for "move".
    """

    kind: str
    direction: Optional[Direction] = None


MOVE_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

RESET = Command("reset")
QUIT = Command("quit")


def command_for_key(key: int, game_over: bool) -> Optional[Command]:
    """
    Translate a pygame key code.

    R only resets once the game is over; unknown keys map to None.
    """
    if key == pygame.K_ESCAPE:
        return QUIT
    if key == pygame.K_r:
        return RESET if game_over else None
    direction = MOVE_KEYS.get(key)
    if direction is None:
        return None
    return Command("move", direction)
