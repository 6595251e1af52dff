"""
Runtime settings for the snake game shell.

Values come from the environment (optionally via a .env file next to the
working directory) and can be overridden by command-line flags in main.py.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from domain.constants import UPDATES_PER_SECOND


DEFAULT_STATS_DIR = "."
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class Settings:
    stats_dir: str = DEFAULT_STATS_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    fps: int = UPDATES_PER_SECOND


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings() -> Settings:
    load_dotenv()

    stats_dir = os.getenv("SNAKE_STATS_DIR", DEFAULT_STATS_DIR).strip() or DEFAULT_STATS_DIR
    log_level = os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL

    return Settings(
        stats_dir=stats_dir,
        log_level=log_level,
        fps=_get_int("SNAKE_FPS", UPDATES_PER_SECOND),
    )
