"""
Entry point for the snake game.

Opens a window and runs the real-time loop: key presses become engine
commands, frame deltas drive SnakeGame.tick(), and every frame is drawn
from a GameState snapshot. `--headless` runs the engine without a window.
"""

import argparse
import logging
import random
from typing import Optional

import pygame

from config import Settings, load_settings
from domain.constants import GRID_SIZE, WINDOW_HEIGHT, WINDOW_WIDTH
from domain.direction import Direction
from game_engine import SnakeGame
from presentation.input_map import command_for_key
from presentation.renderer import Renderer


logger = logging.getLogger(__name__)

WINDOW_TITLE = "Snake Game"
TURN_PROBABILITY = 0.2


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def run_window(game: SnakeGame, settings: Settings) -> None:
    """Run the pygame loop until the window is closed or Esc is pressed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(screen)
        clock = pygame.time.Clock()

        running = True
        while running:
            dt = clock.tick(settings.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    command = command_for_key(event.key, game.is_game_over)
                    if command is None:
                        continue
                    if command.kind == "quit":
                        running = False
                    elif command.kind == "reset":
                        game.reset()
                    else:
                        game.set_direction(command.direction)

            game.tick(dt)
            renderer.draw(game.get_current_state())
            pygame.display.flip()
    finally:
        game.close()
        pygame.quit()


def run_headless(game: SnakeGame, steps: int, seed: Optional[int] = None) -> int:
    """
    Drive the engine without a window, turning at random now and then.

    Returns the number of steps taken before the game ended or `steps` ran out.
    """
    driver = random.Random(seed)
    taken = 0
    while taken < steps and not game.is_game_over:
        if driver.random() < TURN_PROBABILITY:
            game.set_direction(driver.choice(list(Direction)))
        game.step()
        taken += 1

    if not game.is_game_over:
        game.close()

    state = game.get_current_state()
    print("\n" + state.print_board() + "\n")
    print(f"Steps: {taken}  Score: {state.score}  Game over: {state.game_over}")
    return taken


def main():
    parser = argparse.ArgumentParser(
        description="Play snake on a wraparound grid. Session stats are written when a game ends."
    )
    parser.add_argument("--stats-dir", type=str, default=None,
                        help="Directory for *_snake_game_stats.txt files (default: SNAKE_STATS_DIR or .)")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: SNAKE_LOG_LEVEL or INFO)")
    parser.add_argument("--fps", type=int, default=None,
                        help="Shell updates per second (default: SNAKE_FPS or 60)")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window using a random-turn driver")
    parser.add_argument("--steps", type=int, default=200,
                        help="Steps to run in headless mode (default: 200)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for headless mode (food and turns)")

    args = parser.parse_args()

    settings = load_settings()
    if args.stats_dir:
        settings.stats_dir = args.stats_dir
    if args.log_level:
        settings.log_level = args.log_level.upper()
    if args.fps:
        settings.fps = args.fps

    configure_logging(settings.log_level)

    if args.headless:
        rng = random.Random(args.seed) if args.seed is not None else None
        game = SnakeGame(grid_size=GRID_SIZE, stats_dir=settings.stats_dir, rng=rng)
        run_headless(game, args.steps, seed=args.seed)
        return

    game = SnakeGame(grid_size=GRID_SIZE, stats_dir=settings.stats_dir)
    logger.info("Starting %s (stats dir: %s)", WINDOW_TITLE, settings.stats_dir)
    run_window(game, settings)


if __name__ == "__main__":
    main()
