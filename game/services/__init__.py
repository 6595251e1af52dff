"""
Services used by the game engine.
"""

from .game_stats import GameStats, StatsExportError, StatsReport, parse_report

__all__ = [
    'GameStats',
    'StatsExportError',
    'StatsReport',
    'parse_report',
]
