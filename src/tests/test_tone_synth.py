"""
Tests for tone synthesis.
"""

import pytest

from audio_system import ToneSynth


class TestToneSynth:

    def test_sample_count(self):
        synth = ToneSynth(sample_rate=8000)
        assert len(synth.render(440.0, 250)) == 2000

    def test_envelope_decays(self):
        synth = ToneSynth(sample_rate=8000, peak_gain=0.3, end_gain=0.01)
        assert synth.gain_at(0.0, 1.0) == pytest.approx(0.3)
        assert synth.gain_at(1.0, 1.0) == pytest.approx(0.01)
        assert synth.gain_at(0.25, 1.0) > synth.gain_at(0.75, 1.0)

    def test_amplitude_bounded_by_peak_gain(self):
        synth = ToneSynth(sample_rate=8000, peak_gain=0.3)
        samples = synth.render(659.25, 100)
        limit = int(ToneSynth.MAX_AMPLITUDE * 0.3) + 1
        assert max(abs(s) for s in samples) <= limit
        assert max(abs(s) for s in samples) > 0

    def test_tail_quieter_than_head(self):
        synth = ToneSynth(sample_rate=8000)
        samples = synth.render(329.63, 500)
        quarter = len(samples) // 4
        assert max(map(abs, samples[-quarter:])) < max(map(abs, samples[:quarter]))

    def test_invalid_parameters(self):
        with pytest.raises(ValueError):
            ToneSynth(peak_gain=0.01, end_gain=0.3)
        with pytest.raises(ValueError):
            ToneSynth().render(0, 100)
