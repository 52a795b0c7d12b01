"""
Symbols - the four color/tone signals the player has to memorise
"""

import enum


class Symbol(enum.Enum):
    """One presentable signal. Values are the tile indices on the board."""
    BLUE = 0
    RED = 1
    YELLOW = 2
    GREEN = 3

    @property
    def tone_hz(self) -> float:
        """Frequency of the tone played with this symbol"""
        return _TONES_HZ[self]


_TONES_HZ = {
    Symbol.BLUE: 329.63,    # E4
    Symbol.RED: 392.00,     # G4
    Symbol.YELLOW: 523.25,  # C5
    Symbol.GREEN: 659.25,   # E5
}

ALL_SYMBOLS = tuple(Symbol)
