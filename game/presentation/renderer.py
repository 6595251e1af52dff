"""
pygame renderer for GameState snapshots.
"""

import pygame

from domain.constants import CELL_SIZE
from domain.game_state import GameState


BACKGROUND = (0, 0, 0)
SNAKE_COLOR = (0, 255, 0)
FOOD_COLOR = (255, 0, 0)
SCORE_COLOR = (255, 255, 0)
GAME_OVER_OVERLAY = (255, 0, 0, 128)

SCORE_BLOCK_SIZE = 10
SCORE_BLOCK_SPACING = 15
SCORE_MARGIN = 10


class Renderer:
    """Draws one frame per call; holds no game state of its own."""

    def __init__(self, surface: pygame.Surface, cell_size: int = CELL_SIZE):
        self.surface = surface
        self.cell_size = cell_size
        self._overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        self._overlay.fill(GAME_OVER_OVERLAY)

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)

    def draw(self, state: GameState) -> None:
        self.surface.fill(BACKGROUND)

        for x, y in state.snake_positions:
            pygame.draw.rect(self.surface, SNAKE_COLOR, self.cell_rect(x, y))

        pygame.draw.rect(self.surface, FOOD_COLOR, self.cell_rect(*state.food))

        # No font rendering: one block per point
        for i in range(state.score):
            block = pygame.Rect(
                SCORE_MARGIN + i * SCORE_BLOCK_SPACING,
                SCORE_MARGIN,
                SCORE_BLOCK_SIZE,
                SCORE_BLOCK_SIZE,
            )
            pygame.draw.rect(self.surface, SCORE_COLOR, block)

        if state.game_over:
            self.surface.blit(self._overlay, (0, 0))
