"""
Game state record owned by the sequence engine
"""

import enum
from dataclasses import dataclass, field
from typing import List

from .symbols import Symbol


class Phase(enum.Enum):
    """Turn-taking phase of the sequence engine"""
    IDLE = "idle"
    PRESENTING = "presenting"
    AWAITING_INPUT = "awaiting_input"
    ROUND_COMPLETE = "round_complete"
    GAME_OVER = "game_over"

    @property
    def in_game(self) -> bool:
        """True while a game is running (start requests are ignored)"""
        return self in (Phase.PRESENTING, Phase.AWAITING_INPUT, Phase.ROUND_COMPLETE)


@dataclass
class GameState:
    """
    Mutable record of one game.

    Only best_score outlives a game; everything else is cleared by
    reset_for_new_game().
    """
    initial_speed_ms: int = 600
    sequence: List[Symbol] = field(default_factory=list)
    player_input: List[Symbol] = field(default_factory=list)
    round: int = 0
    score: int = 0
    best_score: int = 0
    phase: Phase = Phase.IDLE
    speed_ms: int = field(init=False)

    def __post_init__(self):
        self.speed_ms = self.initial_speed_ms

    def reset_for_new_game(self) -> None:
        """Clear sequence, input, round, score and restore the initial speed"""
        self.sequence = []
        self.player_input = []
        self.round = 0
        self.score = 0
        self.speed_ms = self.initial_speed_ms

    @property
    def input_is_prefix(self) -> bool:
        """True if player_input matches the start of sequence"""
        return self.sequence[:len(self.player_input)] == self.player_input

    @property
    def round_is_complete(self) -> bool:
        return bool(self.sequence) and len(self.player_input) == len(self.sequence)

    def __str__(self) -> str:
        return (
            f"GameState(phase={self.phase.name}, round={self.round}, score={self.score}, "
            f"best={self.best_score}, speed={self.speed_ms}ms, "
            f"input={len(self.player_input)}/{len(self.sequence)})"
        )
