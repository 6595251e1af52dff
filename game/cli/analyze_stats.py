#!/usr/bin/env python3
"""Summarize exported snake game stats files.

Scans a directory for *_snake_game_stats.txt reports and prints:
- number of sessions, best / average score, total time played
- overall turn distribution (up / down / left / right)
- top N sessions by score and by time played

Everything is read from the plain-text reports; nothing else is stored.
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

# Ensure top-level game modules are importable when run as a script
GAME_ROOT = Path(__file__).resolve().parent.parent
if str(GAME_ROOT) not in sys.path:
    sys.path.insert(0, str(GAME_ROOT))

from domain.constants import STATS_FILE_SUFFIX  # noqa: E402
from services.game_stats import parse_report  # noqa: E402


logger = logging.getLogger(__name__)


def _get_stats_dir() -> str:
    d = os.getenv("SNAKE_STATS_DIR", ".").strip()
    return d or "."


@dataclass
class SessionMetrics:
    filename: str
    final_score: int
    food_eaten: int
    time_played_seconds: int
    up_turns: int
    down_turns: int
    left_turns: int
    right_turns: int
    total_turns: int


@dataclass
class Summary:
    sessions: int
    best_score: int
    average_score: float
    total_time_played_seconds: int
    turns: Dict[str, int]


def iter_stats_files(root: Path) -> List[Path]:
    """Return a sorted list of stats reports (sorted by start time via the name)."""
    return sorted(root.glob(f"*{STATS_FILE_SUFFIX}"))


def extract_metrics(path: Path) -> Optional[SessionMetrics]:
    try:
        data = parse_report(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load %s: %s", path.name, exc)
        return None

    return SessionMetrics(
        filename=path.name,
        final_score=data["final_score"],
        food_eaten=data["food_eaten"],
        time_played_seconds=data["time_played_seconds"],
        up_turns=data["up_turns"],
        down_turns=data["down_turns"],
        left_turns=data["left_turns"],
        right_turns=data["right_turns"],
        total_turns=data["total_turns"],
    )


def summarize(sessions: List[SessionMetrics]) -> Summary:
    if not sessions:
        return Summary(0, 0, 0.0, 0, {"up": 0, "down": 0, "left": 0, "right": 0})

    return Summary(
        sessions=len(sessions),
        best_score=max(s.final_score for s in sessions),
        average_score=sum(s.final_score for s in sessions) / len(sessions),
        total_time_played_seconds=sum(s.time_played_seconds for s in sessions),
        turns={
            "up": sum(s.up_turns for s in sessions),
            "down": sum(s.down_turns for s in sessions),
            "left": sum(s.left_turns for s in sessions),
            "right": sum(s.right_turns for s in sessions),
        },
    )


def format_duration(seconds: int) -> str:
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}m {secs}s"


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Summarize exported snake game stats files",
    )
    parser.add_argument(
        "--root",
        type=str,
        default=_get_stats_dir(),
        help="Directory containing *_snake_game_stats.txt (default: SNAKE_STATS_DIR or .)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=5,
        help="How many top sessions to show per metric (default: 5)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
    )

    root = Path(args.root).resolve()
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Root directory does not exist or is not a directory: {root}")

    paths = iter_stats_files(root)
    if not paths:
        logger.info("No *%s files found under %s", STATS_FILE_SUFFIX, root)
        return

    logger.info("Analyzing %d stats files under %s", len(paths), root)

    sessions: List[SessionMetrics] = []
    for p in paths:
        m = extract_metrics(p)
        if m is not None:
            sessions.append(m)

    if not sessions:
        logger.info("No valid stats files parsed")
        return

    summary = summarize(sessions)
    logger.info("")
    logger.info("Sessions: %d", summary.sessions)
    logger.info("Best score: %d", summary.best_score)
    logger.info("Average score: %.2f", summary.average_score)
    logger.info("Total time played: %s", format_duration(summary.total_time_played_seconds))
    logger.info(
        "Turns: up=%d down=%d left=%d right=%d",
        summary.turns["up"],
        summary.turns["down"],
        summary.turns["left"],
        summary.turns["right"],
    )

    top_n = max(1, args.top)

    def show(title: str, items: List[SessionMetrics], key_desc: str):
        logger.info("")
        logger.info("=== %s (top %d by %s) ===", title, top_n, key_desc)
        for s in items[:top_n]:
            logger.info(
                "%s  score=%d  food=%d  played=%s  turns=%d",
                s.filename,
                s.final_score,
                s.food_eaten,
                format_duration(s.time_played_seconds),
                s.total_turns,
            )

    show("Highest-scoring sessions", sorted(sessions, key=lambda s: s.final_score, reverse=True), "final_score")
    show("Longest sessions", sorted(sessions, key=lambda s: s.time_played_seconds, reverse=True), "time_played")


if __name__ == "__main__":
    main()
