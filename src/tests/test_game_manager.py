"""
Tests for the frame loop wiring between input, presenter and engine.
"""

from typing import List

import pytest

from audio_system import MockSoundController
from display_system.interfaces import IBoardDisplay
from game_system import AudioConfig, DisplayConfig, Phase, SequenceEngine, Symbol
from game_system.game_manager import GameManager
from game_system.presenter import PygamePresenter
from input_system import Command, InputState
from input_system.interfaces import IInputReader
from storage import InMemoryBestScoreStore

from game_helpers import ScriptedSymbols


class QueuedInputReader(IInputReader):
    def __init__(self):
        self.queue: List[InputState] = []
        self.cleaned_up = False

    def push(self, symbols=(), commands=()):
        self.queue.append(InputState(list(symbols), list(commands)))

    def read_input(self):
        return self.queue.pop(0) if self.queue else InputState.empty()

    def cleanup(self):
        self.cleaned_up = True


class RecordingDisplay(IBoardDisplay):
    def __init__(self):
        self.frames = 0
        self.cleaned_up = False

    def tile_at(self, pos):
        return None

    def command_at(self, pos):
        return None

    def render(self, view):
        self.frames += 1

    def cleanup(self):
        self.cleaned_up = True


@pytest.fixture
def reader():
    return QueuedInputReader()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def sound(logger):
    return MockSoundController(AudioConfig(), logger)


@pytest.fixture
def manager(reader, display, sound, scheduler, logger):
    presenter = PygamePresenter(sound, scheduler, DisplayConfig(), logger)
    engine = SequenceEngine(presenter, InMemoryBestScoreStore(), scheduler, logger,
                            symbol_source=ScriptedSymbols([Symbol.RED, Symbol.GREEN]))
    return GameManager(reader, display, presenter, engine, scheduler, logger, frame_duration_ms=10)


def run_frames(manager, clock, count: int) -> None:
    for _ in range(count):
        clock.advance_ms(10)
        manager.update()


class TestGameManager:

    def test_update_renders_every_frame(self, manager, display, clock):
        run_frames(manager, clock, 3)
        assert display.frames == 3

    def test_start_command_starts_game(self, manager, reader, clock):
        reader.push(commands=[Command.START])
        run_frames(manager, clock, 1)
        assert manager.engine.phase is Phase.PRESENTING

    def test_symbol_press_reaches_engine_with_feedback(self, manager, reader, sound, clock):
        reader.push(commands=[Command.START])
        run_frames(manager, clock, 130)
        assert manager.engine.phase is Phase.AWAITING_INPUT

        reader.push(symbols=[Symbol.RED])
        run_frames(manager, clock, 1)

        assert manager.engine.phase is Phase.ROUND_COMPLETE
        assert manager.engine.state.score == 10
        assert sound.played[-1] == (Symbol.RED.tone_hz, 200)

    def test_presses_during_playback_ignored(self, manager, reader, sound, clock):
        reader.push(commands=[Command.START])
        run_frames(manager, clock, 1)
        played_before = len(sound.played)

        reader.push(symbols=[Symbol.RED, Symbol.GREEN])
        run_frames(manager, clock, 1)

        assert manager.engine.state.player_input == []
        assert len(sound.played) == played_before

    def test_modal_dismiss_starts_game(self, manager, reader, clock):
        manager.presenter.show_intro()
        reader.push(commands=[Command.DISMISS_MODAL])
        run_frames(manager, clock, 1)

        assert manager.presenter.view.modal is None
        assert manager.engine.phase is Phase.PRESENTING

    def test_reset_command(self, manager, reader, clock):
        reader.push(commands=[Command.START])
        run_frames(manager, clock, 5)
        reader.push(commands=[Command.RESET])
        run_frames(manager, clock, 1)

        assert manager.engine.phase is Phase.IDLE
        assert manager.engine.state.sequence == []

    def test_quit_stops_loop(self, manager, reader, display):
        reader.push(commands=[Command.QUIT])
        manager.run_game_loop()

        assert not manager.running
        assert reader.cleaned_up
        assert display.cleaned_up
