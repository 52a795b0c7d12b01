"""
Pixel - a board color stored as a packed 0xRRGGBB integer
"""

from typing import Tuple


class Pixel(int):
    """
    Packed 24-bit color.

    Palette entries are written as CSS-style hex strings and handed to pygame
    as (r, g, b) tuples; brightness changes go through scaled().
    """

    def __new__(cls, value: int) -> 'Pixel':
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"Color out of range: {value:#x}")
        return int.__new__(cls, value)

    @classmethod
    def from_hex(cls, text: str) -> 'Pixel':
        """Parse '#3B82F6' or '3B82F6'"""
        digits = text[1:] if text.startswith("#") else text
        if len(digits) != 6:
            raise ValueError(f"Expected six hex digits, got {text!r}")
        return cls(int(digits, 16))

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> 'Pixel':
        def clamp(channel: float) -> int:
            return max(0, min(255, int(channel)))
        return cls((clamp(red) << 16) | (clamp(green) << 8) | clamp(blue))

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self >> 16) & 0xFF, (self >> 8) & 0xFF, self & 0xFF

    def scaled(self, factor: float) -> 'Pixel':
        """Each channel multiplied by factor, clamped to 0-255"""
        return Pixel.from_rgb(*(channel * factor for channel in self.rgb))

    def __repr__(self) -> str:
        return f"Pixel('#{int(self):06X}')"
