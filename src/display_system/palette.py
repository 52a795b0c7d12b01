"""
Board palette - tile colors per symbol
"""

from game_system.symbols import Symbol
from .pixel import Pixel


TILE_COLORS = {
    Symbol.BLUE: Pixel.from_hex("#3B82F6"),
    Symbol.RED: Pixel.from_hex("#EF4444"),
    Symbol.YELLOW: Pixel.from_hex("#EAB308"),
    Symbol.GREEN: Pixel.from_hex("#22C55E"),
}

IDLE_DIM_FACTOR = 0.45
LIT_BRIGHT_FACTOR = 1.35
DISABLED_DIM_FACTOR = 0.3

ERROR_COLOR = Pixel.from_hex("#B91C1C")
TEXT_COLOR = Pixel.from_hex("#F1F5F9")
MUTED_TEXT_COLOR = Pixel.from_hex("#94A3B8")
PANEL_COLOR = Pixel.from_hex("#334155")
PROGRESS_COLOR = Pixel.from_hex("#8B5CF6")
OVERLAY_COLOR = Pixel.from_hex("#0F172A")


def tile_color(symbol: Symbol, lit: bool, enabled: bool) -> Pixel:
    """Color of a tile given its highlight and input-enabled state"""
    base = TILE_COLORS[symbol]
    if lit:
        return base.scaled(LIT_BRIGHT_FACTOR)
    if not enabled:
        return base.scaled(DISABLED_DIM_FACTOR)
    return base.scaled(IDLE_DIM_FACTOR)
