"""
Game system configuration
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple


DEFAULT_BEST_SCORE_PATH = str(Path.home() / ".memory_flow" / "best_score.json")


@dataclass
class EngineConfig:
    """Timing and scoring rules of the sequence engine"""
    initial_speed_ms: int = 600
    speed_step_ms: int = 50
    speed_step_every_rounds: int = 5
    min_speed_ms: int = 300
    symbol_gap_ms: int = 100
    lead_in_ms: int = 500
    round_complete_delay_ms: int = 800
    points_per_round: int = 10

    def speed_for_round(self, round_number: int) -> int:
        """Playback speed used when presenting round_number (1-based)"""
        steps = round_number // self.speed_step_every_rounds
        return max(self.min_speed_ms, self.initial_speed_ms - self.speed_step_ms * steps)


@dataclass
class DisplayConfig:
    """Window and visual feedback configuration"""
    width: int = 480
    height: int = 640
    caption: str = "Memory Flow"
    font_size: int = 24
    press_flash_ms: int = 200
    error_flash_ms: int = 400
    game_over_modal_delay_ms: int = 1000
    background: Tuple[int, int, int] = (24, 24, 36)


@dataclass
class AudioConfig:
    """Tone synthesis configuration"""
    sample_rate: int = 44100
    peak_gain: float = 0.3
    end_gain: float = 0.01
    press_tone_ms: int = 200
    fail_tone_hz: float = 130.81  # C3
    fail_tone_ms: int = 500
    mock_audio: bool = False


@dataclass
class GameConfig:
    """Main game configuration"""

    engine: EngineConfig = field(default_factory=EngineConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)

    frame_duration_ms: float = 16.67  # ~60 FPS
    best_score_path: str = DEFAULT_BEST_SCORE_PATH
    seed: Optional[int] = None

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Basic validation of configuration"""
        engine = self.engine
        if engine.initial_speed_ms <= 0:
            raise ValueError("Initial speed must be positive")

        if not (0 < engine.min_speed_ms <= engine.initial_speed_ms):
            raise ValueError(
                f"Minimum speed must be in (0, {engine.initial_speed_ms}], got {engine.min_speed_ms}"
            )

        if engine.speed_step_ms < 0:
            raise ValueError(f"Speed step must not be negative, got {engine.speed_step_ms}")

        if engine.speed_step_every_rounds <= 0:
            raise ValueError("Speed step interval must be at least one round")

        for name in ("symbol_gap_ms", "lead_in_ms", "round_complete_delay_ms"):
            if getattr(engine, name) < 0:
                raise ValueError(f"{name} must not be negative")

        if engine.points_per_round <= 0:
            raise ValueError("Points per round must be positive")

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        if self.display.width <= 0 or self.display.height <= 0:
            raise ValueError(f"Invalid window size {self.display.width}x{self.display.height}")

        if not (0.0 < self.audio.end_gain < self.audio.peak_gain <= 1.0):
            raise ValueError("Audio gains must satisfy 0 < end_gain < peak_gain <= 1")

        if self.audio.sample_rate <= 0:
            raise ValueError("Sample rate must be positive")
