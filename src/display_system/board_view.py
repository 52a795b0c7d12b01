"""
BoardView - everything the renderer draws, as plain data
"""

from dataclasses import dataclass, field
from typing import Optional, Set

from game_system.symbols import Symbol


@dataclass
class Modal:
    title: str
    message: str
    button_text: str


@dataclass
class BoardView:
    """Mutable render state, updated by the presenter and drawn every frame"""
    lit_tiles: Set[Symbol] = field(default_factory=set)
    error_flash: bool = False
    input_enabled: bool = False
    start_enabled: bool = True
    start_label: str = "Start Game"
    status: str = ""
    score: int = 0
    round: int = 0
    best_score: int = 0
    progress: float = 0.0  # 0.0 - 1.0
    modal: Optional[Modal] = None
