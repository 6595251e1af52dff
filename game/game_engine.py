"""
Game engine for the single-player toroidal snake game.

SnakeGame owns every piece of mutable game state (snake, food, direction,
score, speed, game-over flag and the session's GameStats). The shell feeds
it key presses through set_direction()/reset() and frame deltas through
tick(), then reads get_current_state() to draw the frame.
"""

import logging
import random
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from domain.constants import (
    BASE_SPEED,
    GRID_SIZE,
    MIN_SPEED,
    SPEED_DECREMENT,
    START_DIRECTION,
)
from domain.direction import Direction
from domain.game_state import GameState
from domain.position import Position, advance
from domain.snake import Snake
from services.game_stats import GameStats, StatsExportError, StatsReport, local_now


logger = logging.getLogger(__name__)


class GamePhase(str, Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


def speed_for_score(score: int) -> float:
    """Seconds per step for a given score, never below MIN_SPEED."""
    return max(MIN_SPEED, BASE_SPEED - score * SPEED_DECREMENT)


class SnakeGame:
    """
    Manages:
      - Board (square, wraps at every edge)
      - Snake and its heading
      - Food
      - Score and speed
      - Session statistics, exported once when the session ends
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        stats_dir: Union[str, Path] = ".",
        rng=None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if grid_size <= 0:
            raise ValueError("grid_size must be positive")

        self.grid_size = grid_size
        self.stats_dir = Path(stats_dir)
        # Anything with randint(a, b); the random module by default
        self._rng = rng if rng is not None else random
        self._clock = clock if clock is not None else local_now
        self._last_report: Optional[StatsReport] = None

        self._start_session()

    def _start_session(self):
        # (10, 10) on the standard 20x20 board
        center = self.grid_size // 2
        self._snake = Snake([(center, center)])
        self._direction = Direction(START_DIRECTION)
        self._phase = GamePhase.RUNNING
        self._score = 0
        self._speed = BASE_SPEED
        self._last_update = 0.0
        self._stats = GameStats.start(self._clock())
        self._food = self._random_free_cell()
        logger.debug("New session started at %s, food at %s", self._stats.start_time, self._food)

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def snake(self) -> Tuple[Position, ...]:
        return self._snake.segments()

    @property
    def food(self) -> Position:
        return self._food

    @property
    def score(self) -> int:
        return self._score

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_game_over(self) -> bool:
        return self._phase is GamePhase.GAME_OVER

    @property
    def stats(self) -> GameStats:
        return self._stats

    @property
    def last_report(self) -> Optional[StatsReport]:
        """The report written for the most recently ended session, if any."""
        return self._last_report

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            snake_positions=self._snake.segments(),
            food=self._food,
            score=self._score,
            game_over=self.is_game_over,
            width=self.grid_size,
            height=self.grid_size,
            speed=self._speed,
            direction=self._direction,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def tick(self, dt: float) -> bool:
        """
        Advance the step timer by `dt` seconds.

        Returns True when a discrete step ran on this call. Rendering can
        therefore run at any frame rate while the snake moves once per
        `speed` seconds.
        """
        if self.is_game_over:
            return False

        self._stats.refresh_elapsed(self._clock())

        self._last_update += dt
        if self._last_update < self._speed:
            return False
        self._last_update = 0.0

        return self.step()

    def step(self) -> bool:
        """
        Execute one discrete step:
          1) Compute the next head cell (wrapping at the edges)
          2) End the game if it lands on the body; the snake is left as is
          3) Otherwise move the head there
          4) On food: score, speed up and move the food
          5) Without food: drop the tail
        """
        if self.is_game_over:
            return False

        new_head = advance(self._snake.head, self._direction, self.grid_size)

        if self._snake.hits_body(new_head):
            self.end_game()
            return True

        ate = new_head == self._food
        self._snake.move_to(new_head, grow=ate)

        if ate:
            self._score += 1
            self._stats.record_food()
            self._speed = speed_for_score(self._score)
            self._food = self._random_free_cell()
            logger.debug(
                "Food eaten at %s, score=%d, speed=%.3f, next food at %s",
                new_head, self._score, self._speed, self._food,
            )

        return True

    def set_direction(self, requested: Direction) -> bool:
        """
        Change heading for the next step. A direct reversal is ignored.

        Returns True if the turn was accepted and counted.
        """
        if self.is_game_over:
            return False

        requested = Direction.from_name(requested)
        if requested.opposite == self._direction:
            return False

        self._stats.record_turn(requested)
        self._direction = requested
        return True

    def reset(self) -> Optional[StatsReport]:
        """
        Close the current session (writing its stats if that has not
        happened yet) and start a fresh game.

        Returns the report of the session that just ended, or None if it
        could not be written.
        """
        report = self._flush_stats()
        self._start_session()
        return report

    def end_game(self) -> None:
        if self.is_game_over:
            return
        self._stats.refresh_elapsed(self._clock())
        self._phase = GamePhase.GAME_OVER
        logger.info("Game Over: score %d, length %d", self._score, len(self._snake))
        self._flush_stats()

    def close(self) -> Optional[StatsReport]:
        """End the session without starting a new one (e.g. window closed)."""
        return self._flush_stats()

    def place_food(self, position: Tuple[int, int]) -> None:
        """Put the food on a specific free cell."""
        cell = Position(*position)
        if not (0 <= cell.x < self.grid_size and 0 <= cell.y < self.grid_size):
            raise ValueError(f"Food out of bounds at {tuple(cell)}.")
        if self._snake.occupies(cell):
            raise ValueError(f"Food cannot be placed on the snake at {tuple(cell)}.")
        self._food = cell

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _random_free_cell(self) -> Position:
        """
        Return a random cell not occupied by the snake.
        Draws until a free cell comes up.
        """
        while True:
            cell = Position(
                self._rng.randint(0, self.grid_size - 1),
                self._rng.randint(0, self.grid_size - 1),
            )
            if not self._snake.occupies(cell):
                return cell

    def _flush_stats(self) -> Optional[StatsReport]:
        """Write this session's report; failures are logged, never raised."""
        if self._stats.exported:
            return self._stats.report
        # Time on the game-over screen is not counted
        if not self.is_game_over:
            self._stats.refresh_elapsed(self._clock())
        try:
            self._last_report = self._stats.export(self._score, self.stats_dir)
        except StatsExportError as exc:
            logger.error("Error saving stats: %s", exc)
            return None
        logger.info("Session stats: %s", self._stats.to_dict(self._score))
        return self._last_report

    def __repr__(self):
        return (
            f"<SnakeGame phase={self._phase.value}, score={self._score}, "
            f"length={len(self._snake)}, direction={self._direction.value}>"
        )
