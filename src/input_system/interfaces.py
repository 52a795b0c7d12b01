"""
Abstract interfaces for input reading
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from game_system.symbols import Symbol
from .commands import Command
from .input_state import InputState


class IHitTester(ABC):
    """Maps pointer positions to on-screen tiles and buttons"""

    @abstractmethod
    def tile_at(self, pos: Tuple[int, int]) -> Optional[Symbol]:
        pass

    @abstractmethod
    def command_at(self, pos: Tuple[int, int]) -> Optional[Command]:
        pass


class IInputReader(ABC):
    """
    Abstract interface for input reading systems.

    One call per frame; implementations may use pygame events, a terminal,
    or a scripted feed.
    """

    @abstractmethod
    def read_input(self) -> InputState:
        """
        Collect everything the player did since the previous call.

        Returns:
            InputState: Symbols pressed and commands issued this frame
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        pass
