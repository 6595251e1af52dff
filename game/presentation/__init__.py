"""
Presentation shell: keyboard mapping and pygame drawing.

Nothing here changes game rules; it only turns key presses into engine
commands and GameState snapshots into pixels.
"""

from .input_map import Command, command_for_key

__all__ = [
    'Command',
    'command_for_key',
]
