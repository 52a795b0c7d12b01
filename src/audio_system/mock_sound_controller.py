"""
Mock Sound Controller - No-op implementation for running without audio hardware
"""

from typing import List, Tuple

from game_system.symbols import Symbol


class MockSoundController:
    """
    Stand-in for SoundController that plays nothing.

    Keeps a log of requested tones so callers (and tests) can see what would
    have been played.
    """

    def __init__(self, audio_config, logger):
        """
        Args:
            audio_config: AudioConfig (only the feedback tone settings are used)
            logger: ClassLogger instance for logging
        """
        self.config = audio_config
        self.logger = logger
        self.played: List[Tuple[float, int]] = []

        self.logger.info("🔇 MockSoundController initialized (audio disabled)")

    def play_tone(self, frequency_hz: float, duration_ms: int) -> None:
        self.played.append((frequency_hz, duration_ms))
        self.logger.debug(f"Mock: Playing tone {frequency_hz}Hz for {duration_ms}ms")
        return None

    def play_symbol(self, symbol: Symbol, duration_ms: int) -> None:
        self.play_tone(symbol.tone_hz, duration_ms)

    def play_press(self, symbol: Symbol) -> None:
        self.play_tone(symbol.tone_hz, self.config.press_tone_ms)

    def play_fail(self) -> None:
        self.play_tone(self.config.fail_tone_hz, self.config.fail_tone_ms)

    def stop_all(self) -> None:
        pass

    def cleanup(self) -> None:
        self.played.clear()
        self.logger.debug("Mock: Sound controller cleaned up")
