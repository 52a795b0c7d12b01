"""
Sound Controller - plays symbol tones through pygame.mixer
"""

from array import array
from typing import Dict, Optional, Tuple

import pygame

from game_system.symbols import Symbol
from .tone_synth import ToneSynth


class SoundController:
    """
    Plays the game's synthesized tones.

    Tones are rendered on first use and cached per (frequency, duration), so
    replaying a long sequence does not re-synthesize anything.
    """

    def __init__(self, audio_config, logger):
        """
        Initialize the mixer and the synthesizer.

        Args:
            audio_config: AudioConfig with sample rate, gains and feedback tones
            logger: ClassLogger instance for logging

        Raises:
            pygame.error: If no audio device can be opened
        """
        self.config = audio_config
        self.logger = logger

        self.mixer = pygame.mixer
        self.mixer.init(frequency=audio_config.sample_rate, size=-16, channels=1)

        # The device may not honor the requested format
        frequency, _size, channels = self.mixer.get_init()
        self._channels = channels
        self.synth = ToneSynth(
            sample_rate=frequency,
            peak_gain=audio_config.peak_gain,
            end_gain=audio_config.end_gain
        )
        self._tone_cache: Dict[Tuple[float, int], pygame.mixer.Sound] = {}

        self.logger.info(f"SoundController initialized: {frequency}Hz, {channels} channel(s)")

    def _get_tone(self, frequency_hz: float, duration_ms: int) -> pygame.mixer.Sound:
        key = (frequency_hz, duration_ms)
        sound = self._tone_cache.get(key)
        if sound is None:
            samples = self.synth.render(frequency_hz, duration_ms)
            if self._channels > 1:
                samples = self._interleave(samples, self._channels)
            sound = pygame.mixer.Sound(buffer=samples.tobytes())
            self._tone_cache[key] = sound
            self.logger.debug(f"Synthesized tone {frequency_hz}Hz / {duration_ms}ms")
        return sound

    @staticmethod
    def _interleave(samples: array, channels: int) -> array:
        interleaved = array('h', bytes(2 * len(samples) * channels))
        for channel in range(channels):
            interleaved[channel::channels] = samples
        return interleaved

    def play_tone(self, frequency_hz: float, duration_ms: int) -> Optional[pygame.mixer.Channel]:
        """
        Play a tone.

        Returns:
            pygame.mixer.Channel playing the tone, or None if no channel was free
        """
        return self._get_tone(frequency_hz, duration_ms).play()

    def play_symbol(self, symbol: Symbol, duration_ms: int) -> None:
        """Play the tone of a symbol for duration_ms"""
        self.play_tone(symbol.tone_hz, duration_ms)

    def play_press(self, symbol: Symbol) -> None:
        """Short feedback tone for a player press"""
        self.play_tone(symbol.tone_hz, self.config.press_tone_ms)

    def play_fail(self) -> None:
        """Low tone played on game over"""
        self.play_tone(self.config.fail_tone_hz, self.config.fail_tone_ms)

    def stop_all(self) -> None:
        self.mixer.stop()

    def cleanup(self) -> None:
        """Release the audio device"""
        if self.mixer.get_init():
            self.mixer.stop()
            self.mixer.quit()
        self._tone_cache.clear()
        self.logger.info("SoundController cleaned up")
