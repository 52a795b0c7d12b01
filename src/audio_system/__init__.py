"""
Audio System Module

Tone synthesis and playback for the memory game: one tone per symbol plus
press feedback and the game over tone.
"""

from .tone_synth import ToneSynth
from .sound_controller import SoundController
from .mock_sound_controller import MockSoundController

__all__ = [
    'ToneSynth',
    'SoundController',
    'MockSoundController'
]
