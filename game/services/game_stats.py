"""
Session statistics for a single game.

A GameStats instance is created when a game session starts, collects turn
and food counters while the session runs, and is written to a plain-text
report exactly once when the session ends (game over or reset).

Report file name: <YYYYMMDD_HHMMSS>_snake_game_stats.txt, taken from the
session start time in the local time zone.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, Optional, Union

from domain.constants import STATS_FILE_SUFFIX
from domain.direction import Direction


logger = logging.getLogger(__name__)

FILENAME_TIME_FORMAT = "%Y%m%d_%H%M%S"
DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class StatsExportError(OSError):
    """The stats report could not be created or written."""


@dataclass(frozen=True)
class StatsReport:
    """A report that has been written to disk."""

    path: Path
    final_score: int
    content: str


def local_now() -> datetime:
    return datetime.now().astimezone()


class GameStats:
    """
    Counters for one game session.

    Attributes:
        start_time: when the session started
        time_played: elapsed time, refreshed by the engine while running
        up_turns, down_turns, left_turns, right_turns: accepted turns per direction
        food_eaten: number of food items consumed
    """

    def __init__(self, now: Optional[datetime] = None):
        self.start_time = now if now is not None else local_now()
        self.time_played = timedelta(0)
        self.up_turns = 0
        self.down_turns = 0
        self.left_turns = 0
        self.right_turns = 0
        self.food_eaten = 0
        self._report: Optional[StatsReport] = None

    @classmethod
    def start(cls, now: Optional[datetime] = None) -> "GameStats":
        return cls(now)

    def record_turn(self, direction: Direction) -> None:
        direction = Direction(direction)
        if direction is Direction.UP:
            self.up_turns += 1
        elif direction is Direction.DOWN:
            self.down_turns += 1
        elif direction is Direction.LEFT:
            self.left_turns += 1
        else:
            self.right_turns += 1

    def record_food(self) -> None:
        self.food_eaten += 1

    def refresh_elapsed(self, now: datetime) -> timedelta:
        """Recompute time_played; a clock that went backwards yields zero."""
        self.time_played = max(timedelta(0), now - self.start_time)
        return self.time_played

    @property
    def total_turns(self) -> int:
        return self.up_turns + self.down_turns + self.left_turns + self.right_turns

    @property
    def exported(self) -> bool:
        return self._report is not None

    @property
    def report(self) -> Optional[StatsReport]:
        return self._report

    def report_filename(self) -> str:
        return f"{self.start_time.strftime(FILENAME_TIME_FORMAT)}{STATS_FILE_SUFFIX}"

    def to_dict(self, final_score: int) -> Dict[str, Any]:
        return {
            "started_at": self.start_time.isoformat(),
            "time_played_seconds": int(self.time_played.total_seconds()),
            "final_score": final_score,
            "food_eaten": self.food_eaten,
            "up_turns": self.up_turns,
            "down_turns": self.down_turns,
            "left_turns": self.left_turns,
            "right_turns": self.right_turns,
            "total_turns": self.total_turns,
        }

    def render_report(self, final_score: int) -> str:
        played = int(self.time_played.total_seconds())
        minutes, seconds = divmod(played, 60)

        lines = [
            "Snake Game Statistics",
            "=====================",
            f"Game started at: {self.start_time.strftime(DISPLAY_TIME_FORMAT)}",
            f"Time played: {minutes}m {seconds}s",
            f"Final score: {final_score}",
            f"Food eaten: {self.food_eaten}",
            "",
            "Movement Statistics:",
            f"  Up turns: {self.up_turns}",
            f"  Down turns: {self.down_turns}",
            f"  Left turns: {self.left_turns}",
            f"  Right turns: {self.right_turns}",
            "",
            f"Total turns: {self.total_turns}",
        ]
        return "\n".join(lines) + "\n"

    def export(self, final_score: int, directory: Union[str, Path] = ".") -> StatsReport:
        """
        Write the session report into `directory`.

        Only the first successful call writes; later calls return the
        report that was already written.

        Raises:
            StatsExportError: if the directory or file cannot be created or written
        """
        if self._report is not None:
            return self._report

        content = self.render_report(final_score)
        path = Path(directory) / self.report_filename()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                f.write(content)
        except OSError as exc:
            raise StatsExportError(f"Could not write stats to {path}: {exc}") from exc

        self._report = StatsReport(path=path, final_score=final_score, content=content)
        logger.info("Saved game stats to %s", path)
        return self._report

    def __repr__(self):
        return (
            f"<GameStats started={self.start_time.strftime(DISPLAY_TIME_FORMAT)}, "
            f"food={self.food_eaten}, turns={self.total_turns}>"
        )


_REPORT_FIELDS = {
    "Game started at": "started_at",
    "Time played": "time_played_seconds",
    "Final score": "final_score",
    "Food eaten": "food_eaten",
    "Up turns": "up_turns",
    "Down turns": "down_turns",
    "Left turns": "left_turns",
    "Right turns": "right_turns",
    "Total turns": "total_turns",
}

_TIME_PLAYED_RE = re.compile(r"^(\d+)m (\d+)s$")


def parse_report(text: str) -> Dict[str, Any]:
    """
    Read a report produced by GameStats.render_report back into a dict.

    Raises:
        ValueError: if the text is not a stats report or a field is missing
    """
    lines = text.splitlines()
    if not lines or lines[0].strip() != "Snake Game Statistics":
        raise ValueError("Not a snake game stats report")

    data: Dict[str, Any] = {}
    for line in lines[1:]:
        label, sep, value = line.strip().partition(": ")
        key = _REPORT_FIELDS.get(label)
        if not sep or key is None:
            continue

        if key == "started_at":
            data[key] = datetime.strptime(value, DISPLAY_TIME_FORMAT)
        elif key == "time_played_seconds":
            match = _TIME_PLAYED_RE.match(value)
            if not match:
                raise ValueError(f"Bad time played value: {value!r}")
            data[key] = int(match.group(1)) * 60 + int(match.group(2))
        else:
            data[key] = int(value)

    missing = [k for k in _REPORT_FIELDS.values() if k not in data]
    if missing:
        raise ValueError(f"Stats report is missing fields: {', '.join(missing)}")
    return data
