"""
Abstract interface for board displays
"""

from abc import abstractmethod

from input_system.interfaces import IHitTester
from .board_view import BoardView


class IBoardDisplay(IHitTester):
    """A display that can draw a BoardView and hit-test pointer positions"""

    @abstractmethod
    def render(self, view: BoardView) -> None:
        """Draw the view and present the frame"""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        pass
