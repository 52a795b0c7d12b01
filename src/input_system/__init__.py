"""
Input System Package

Turns keyboard and pointer events into per-frame InputState snapshots.
Symbol keys: 1/Q blue, 2/W red, 3/A yellow, 4/S green.
"""

from .commands import Command
from .input_state import InputState
from .interfaces import IHitTester, IInputReader
from .key_map import SYMBOL_KEYS, COMMAND_KEYS, symbol_for_key, command_for_key, keys_for_symbol
from .pygame_reader import PygameInputReader

__all__ = [
    "Command",
    "InputState",
    "IHitTester",
    "IInputReader",
    "SYMBOL_KEYS",
    "COMMAND_KEYS",
    "symbol_for_key",
    "command_for_key",
    "keys_for_symbol",
    "PygameInputReader"
]
