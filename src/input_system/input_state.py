"""
InputState - one frame's worth of player input with derived fields
"""

from dataclasses import dataclass, field
from typing import List

from game_system.symbols import Symbol
from .commands import Command


@dataclass
class InputState:
    """
    Snapshot of everything the player did during one frame.

    Usage:
        state = InputState([Symbol.RED], [Command.START])
        if state.start_requested: ...
        for symbol in state.pressed_symbols: ...
    """
    pressed_symbols: List[Symbol]    # In the order they were pressed
    commands: List[Command]          # In the order they were issued

    # Calculated fields (not in constructor, computed automatically)
    any_symbol_pressed: bool = field(init=False)
    start_requested: bool = field(init=False)
    reset_requested: bool = field(init=False)
    quit_requested: bool = field(init=False)
    is_empty: bool = field(init=False)

    def __post_init__(self):
        if not isinstance(self.pressed_symbols, list):
            raise TypeError("pressed_symbols must be a list of Symbol")
        if not isinstance(self.commands, list):
            raise TypeError("commands must be a list of Command")
        if not all(isinstance(s, Symbol) for s in self.pressed_symbols):
            raise TypeError("All elements in pressed_symbols must be Symbol")
        if not all(isinstance(c, Command) for c in self.commands):
            raise TypeError("All elements in commands must be Command")

        self.any_symbol_pressed = bool(self.pressed_symbols)
        self.start_requested = Command.START in self.commands
        self.reset_requested = Command.RESET in self.commands
        self.quit_requested = Command.QUIT in self.commands
        self.is_empty = not self.pressed_symbols and not self.commands

    @classmethod
    def empty(cls) -> 'InputState':
        return cls([], [])

    def __str__(self) -> str:
        return (
            f"InputState("
            f"symbols={[s.name for s in self.pressed_symbols]}, "
            f"commands={[c.name for c in self.commands]}"
            f")"
        )
