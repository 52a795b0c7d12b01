"""
Display System - pygame rendering of the memory game board

- Pixel: packed 0xRRGGBB board color
- BoardView: plain render state updated by the presenter
- BoardLayout: window geometry and hit testing
- BoardRenderer: pygame implementation of IBoardDisplay
"""

from .pixel import Pixel
from .palette import TILE_COLORS, ERROR_COLOR, tile_color
from .board_view import BoardView, Modal
from .interfaces import IBoardDisplay
from .board_renderer import BoardLayout, BoardRenderer

__all__ = [
    'Pixel',
    'TILE_COLORS',
    'ERROR_COLOR',
    'tile_color',
    'BoardView',
    'Modal',
    'IBoardDisplay',
    'BoardLayout',
    'BoardRenderer'
]
