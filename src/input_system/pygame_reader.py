"""
pygame input reader - keyboard and pointer events to InputState
"""

from typing import Callable, Iterable, List, Optional

import pygame

from game_system.symbols import Symbol
from .commands import Command
from .input_state import InputState
from .interfaces import IHitTester, IInputReader
from .key_map import command_for_key, symbol_for_key


class PygameInputReader(IInputReader):
    """
    Drains the pygame event queue once per frame.

    Key presses go through the fixed key table, left clicks through the hit
    tester (tiles, then buttons). Window close becomes Command.QUIT. Unbound
    keys and clicks on empty space are ignored.
    """

    def __init__(self, hit_tester: IHitTester, logger,
                 event_source: Optional[Callable[[], Iterable[pygame.event.Event]]] = None):
        """
        Args:
            hit_tester: Maps click positions to tiles and buttons
            logger: ClassLogger instance for logging
            event_source: Returns pending events (defaults to pygame.event.get)
        """
        self.hit_tester = hit_tester
        self.logger = logger
        self._event_source = event_source or pygame.event.get

    def read_input(self) -> InputState:
        symbols: List[Symbol] = []
        commands: List[Command] = []

        for event in self._event_source():
            if event.type == pygame.QUIT:
                commands.append(Command.QUIT)

            elif event.type == pygame.KEYDOWN:
                symbol = symbol_for_key(event.key)
                if symbol is not None:
                    symbols.append(symbol)
                    continue
                command = command_for_key(event.key)
                if command is not None:
                    commands.append(command)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                symbol = self.hit_tester.tile_at(event.pos)
                if symbol is not None:
                    symbols.append(symbol)
                    continue
                command = self.hit_tester.command_at(event.pos)
                if command is not None:
                    commands.append(command)

        state = InputState(symbols, commands)
        if not state.is_empty:
            self.logger.debug(f"Input: {state}")
        return state

    def cleanup(self) -> None:
        pygame.event.clear()
