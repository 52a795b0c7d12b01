"""
Game System - sequence-memory game engine

The engine and its data types import without pygame. The pygame-backed
pieces live in game_system.presenter and game_system.game_manager and are
imported from there.
"""

from .symbols import Symbol, ALL_SYMBOLS
from .game_state import GameState, Phase
from .config import GameConfig, EngineConfig, DisplayConfig, AudioConfig
from .interfaces import IPresentationAdapter
from .sequence_engine import SequenceEngine

__all__ = [
    "Symbol",
    "ALL_SYMBOLS",
    "GameState",
    "Phase",
    "GameConfig",
    "EngineConfig",
    "DisplayConfig",
    "AudioConfig",
    "IPresentationAdapter",
    "SequenceEngine"
]
