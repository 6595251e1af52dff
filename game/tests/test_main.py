"""
Tests for main.py - command-line handling and the headless driver.

The window loop itself needs a display, so these tests stub it out and
check that settings and the engine are wired up correctly.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import config  # noqa: E402
import main  # noqa: E402
from game_engine import SnakeGame  # noqa: E402


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in ("SNAKE_STATS_DIR", "SNAKE_LOG_LEVEL", "SNAKE_FPS"):
        monkeypatch.delenv(name, raising=False)


def run_main(monkeypatch, argv, calls):
    monkeypatch.setattr(sys, "argv", argv)
    monkeypatch.setattr(main, "configure_logging", lambda level: calls.append(("logging", level)))
    monkeypatch.setattr(
        main,
        "run_window",
        lambda game, settings: calls.append(("window", game, settings)),
    )
    main.main()


def test_window_mode_uses_cli_overrides(monkeypatch, tmp_path):
    calls = []
    run_main(
        monkeypatch,
        ["main.py", "--stats-dir", str(tmp_path), "--log-level", "debug", "--fps", "30"],
        calls,
    )

    assert ("logging", "DEBUG") in calls
    window_calls = [c for c in calls if c[0] == "window"]
    assert len(window_calls) == 1
    _, game, settings = window_calls[0]
    assert isinstance(game, SnakeGame)
    assert settings.fps == 30
    assert str(game.stats_dir) == str(tmp_path)


def test_window_mode_uses_env_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("SNAKE_STATS_DIR", str(tmp_path))
    calls = []
    run_main(monkeypatch, ["main.py"], calls)

    _, game, settings = [c for c in calls if c[0] == "window"][0]
    assert settings.stats_dir == str(tmp_path)
    assert ("logging", "INFO") in calls


def test_headless_mode_skips_window(monkeypatch, tmp_path, capsys):
    calls = []
    run_main(
        monkeypatch,
        ["main.py", "--headless", "--steps", "5", "--seed", "7", "--stats-dir", str(tmp_path)],
        calls,
    )

    assert not any(c[0] == "window" for c in calls)
    out = capsys.readouterr().out
    assert "Steps: 5" in out
    # A 1-segment snake cannot hit itself, so the session is closed by the driver
    assert len(list(tmp_path.glob("*_snake_game_stats.txt"))) == 1


def test_run_headless_stops_at_game_over(tmp_path, capsys):
    game = SnakeGame(stats_dir=tmp_path)
    game.end_game()

    taken = main.run_headless(game, steps=50, seed=1)

    assert taken == 0
    assert "Game over: True" in capsys.readouterr().out
