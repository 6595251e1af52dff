"""
Tests for environment-driven settings.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import config  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in ("SNAKE_STATS_DIR", "SNAKE_LOG_LEVEL", "SNAKE_FPS"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = config.load_settings()
    assert settings.stats_dir == "."
    assert settings.log_level == "INFO"
    assert settings.fps == 60


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SNAKE_STATS_DIR", "/tmp/snake")
    monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SNAKE_FPS", "30")

    settings = config.load_settings()

    assert settings.stats_dir == "/tmp/snake"
    assert settings.log_level == "DEBUG"
    assert settings.fps == 30


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("SNAKE_STATS_DIR", "  ")
    monkeypatch.setenv("SNAKE_FPS", "")
    settings = config.load_settings()
    assert settings.stats_dir == "."
    assert settings.fps == 60


@pytest.mark.parametrize("raw", ["fast", "0", "-5"])
def test_bad_fps_is_rejected(monkeypatch, raw):
    monkeypatch.setenv("SNAKE_FPS", raw)
    with pytest.raises(ValueError, match="SNAKE_FPS"):
        config.load_settings()
