"""
Abstract interfaces between the sequence engine and its collaborators
"""

from abc import ABC, abstractmethod
from typing import Callable

from .game_state import Phase
from .symbols import Symbol


class IPresentationAdapter(ABC):
    """
    Everything the sequence engine needs from the outside world to show a game.

    Implementations render tiles, play tones and update text. The engine never
    touches pygame directly; tests substitute a recording fake.
    """

    @abstractmethod
    def present_symbol(self, symbol: Symbol, duration_ms: int, on_complete: Callable[[], None]) -> None:
        """
        Highlight a symbol and play its tone.

        Args:
            symbol: Symbol to present
            duration_ms: How long the symbol stays highlighted
            on_complete: Called once the highlight has ended
        """
        pass

    @abstractmethod
    def report_progress(self, input_length: int, sequence_length: int) -> None:
        """Player progress through the current round"""
        pass

    @abstractmethod
    def report_status(self, message: str) -> None:
        """Single line of status text"""
        pass

    @abstractmethod
    def report_score_update(self, score: int, round_number: int, best_score: int) -> None:
        pass

    @abstractmethod
    def report_game_over(self, round_number: int, score: int, is_new_best: bool) -> None:
        pass

    def report_phase(self, phase: Phase) -> None:
        """Called on every phase change (override to toggle input affordances)"""
        pass
