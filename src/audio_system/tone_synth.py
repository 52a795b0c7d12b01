"""
Tone synthesis - sine tones with an exponential decay envelope
"""

import math
from array import array


class ToneSynth:
    """
    Renders 16-bit signed mono PCM for a sine tone.

    Gain starts at peak_gain and ramps exponentially down to end_gain over
    the tone's duration, so every tone fades out instead of clicking off.

    Example:
        synth = ToneSynth(sample_rate=44100)
        pcm = synth.render(440.0, 200)   # 200ms of A4
        sound = pygame.mixer.Sound(buffer=pcm.tobytes())
    """

    MAX_AMPLITUDE = 32767

    def __init__(self, sample_rate: int = 44100, peak_gain: float = 0.3, end_gain: float = 0.01):
        if not (0.0 < end_gain < peak_gain <= 1.0):
            raise ValueError("Gains must satisfy 0 < end_gain < peak_gain <= 1")
        self.sample_rate = sample_rate
        self.peak_gain = peak_gain
        self.end_gain = end_gain

    def sample_count(self, duration_ms: int) -> int:
        return max(1, int(self.sample_rate * duration_ms / 1000))

    def gain_at(self, t: float, duration_s: float) -> float:
        """Envelope gain at t seconds into a tone lasting duration_s"""
        if duration_s <= 0:
            return self.end_gain
        progress = min(1.0, max(0.0, t / duration_s))
        return self.peak_gain * pow(self.end_gain / self.peak_gain, progress)

    def render(self, frequency_hz: float, duration_ms: int) -> array:
        """
        Render a tone.

        Args:
            frequency_hz: Tone frequency
            duration_ms: Tone length in milliseconds

        Returns:
            array('h') of mono samples
        """
        if frequency_hz <= 0:
            raise ValueError(f"Frequency must be positive, got {frequency_hz}")

        count = self.sample_count(duration_ms)
        duration_s = count / self.sample_rate
        step = 2.0 * math.pi * frequency_hz / self.sample_rate

        samples = array('h', bytes(2 * count))
        for i in range(count):
            gain = self.gain_at(i / self.sample_rate, duration_s)
            samples[i] = int(self.MAX_AMPLITUDE * gain * math.sin(step * i))
        return samples
