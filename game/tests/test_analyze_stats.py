"""
Tests for the stats summary CLI.
"""

import os
import sys
from datetime import datetime, timedelta

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import cli.analyze_stats as analyze  # noqa: E402
from services.game_stats import GameStats  # noqa: E402


def write_session(directory, start, score, seconds, turns=(0, 0, 0, 0)):
    stats = GameStats(start)
    stats.food_eaten = score
    stats.up_turns, stats.down_turns, stats.left_turns, stats.right_turns = turns
    stats.time_played = timedelta(seconds=seconds)
    return stats.export(score, directory).path


@pytest.fixture
def stats_dir(tmp_path):
    write_session(tmp_path, datetime(2024, 1, 1, 10, 0, 0), 4, 90, (1, 2, 3, 4))
    write_session(tmp_path, datetime(2024, 1, 1, 11, 0, 0), 10, 30, (2, 0, 1, 0))
    return tmp_path


def test_iter_stats_files_sorted_by_start(stats_dir):
    names = [p.name for p in analyze.iter_stats_files(stats_dir)]
    assert names == [
        "20240101_100000_snake_game_stats.txt",
        "20240101_110000_snake_game_stats.txt",
    ]


def test_extract_metrics(stats_dir):
    path = analyze.iter_stats_files(stats_dir)[0]
    m = analyze.extract_metrics(path)
    assert m.final_score == 4
    assert m.time_played_seconds == 90
    assert m.total_turns == 10


def test_extract_metrics_skips_garbage(tmp_path, caplog):
    bad = tmp_path / "20240101_120000_snake_game_stats.txt"
    bad.write_text("not a report\n", encoding="utf-8")
    assert analyze.extract_metrics(bad) is None
    assert "Failed to load" in caplog.text


def test_summarize(stats_dir):
    sessions = [analyze.extract_metrics(p) for p in analyze.iter_stats_files(stats_dir)]
    summary = analyze.summarize(sessions)

    assert summary.sessions == 2
    assert summary.best_score == 10
    assert summary.average_score == pytest.approx(7.0)
    assert summary.total_time_played_seconds == 120
    assert summary.turns == {"up": 3, "down": 2, "left": 4, "right": 4}


def test_summarize_empty():
    assert analyze.summarize([]).sessions == 0


def test_format_duration():
    assert analyze.format_duration(125) == "2m 5s"


def test_main_reports_summary(monkeypatch, stats_dir, caplog):
    monkeypatch.setattr(sys, "argv", ["analyze_stats.py", "--root", str(stats_dir), "--top", "1"])
    with caplog.at_level("INFO"):
        analyze.main()

    assert "Sessions: 2" in caplog.text
    assert "Best score: 10" in caplog.text
    assert "Total time played: 2m 0s" in caplog.text


def test_main_rejects_missing_root(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "argv", ["analyze_stats.py", "--root", str(tmp_path / "missing")])
    with pytest.raises(SystemExit):
        analyze.main()
