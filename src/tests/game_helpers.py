"""
Shared test doubles and time-driving helpers.
"""

from typing import Callable, Iterable, List, Tuple

from game_system import Phase, SequenceEngine, Symbol
from game_system.interfaces import IPresentationAdapter
from utils import TimerScheduler


class FakeClock:
    """Manually advanced clock, in seconds like time.monotonic"""

    def __init__(self):
        self.now_ms = 0

    def __call__(self) -> float:
        return self.now_ms / 1000.0

    def advance_ms(self, ms: int) -> None:
        self.now_ms += ms


class RecordingPresenter(IPresentationAdapter):
    """
    Records every engine callback.

    With auto_complete the presentation completes after duration_ms on the
    scheduler; otherwise completions are parked in pending_completions.
    """

    def __init__(self, scheduler: TimerScheduler, auto_complete: bool = True):
        self.scheduler = scheduler
        self.auto_complete = auto_complete
        self.presented: List[Tuple[Symbol, int]] = []
        self.pending_completions: List[Callable[[], None]] = []
        self.progress: List[Tuple[int, int]] = []
        self.statuses: List[str] = []
        self.scores: List[Tuple[int, int, int]] = []
        self.game_overs: List[Tuple[int, int, bool]] = []
        self.phases: List[Phase] = []

    def present_symbol(self, symbol, duration_ms, on_complete):
        self.presented.append((symbol, duration_ms))
        if self.auto_complete:
            self.scheduler.call_later(duration_ms, on_complete)
        else:
            self.pending_completions.append(on_complete)

    def report_progress(self, input_length, sequence_length):
        self.progress.append((input_length, sequence_length))

    def report_status(self, message):
        self.statuses.append(message)

    def report_score_update(self, score, round_number, best_score):
        self.scores.append((score, round_number, best_score))

    def report_game_over(self, round_number, score, is_new_best):
        self.game_overs.append((round_number, score, is_new_best))

    def report_phase(self, phase):
        self.phases.append(phase)


class ScriptedSymbols:
    """Symbol source returning a fixed script, then repeating its last symbol"""

    def __init__(self, symbols: Iterable[Symbol]):
        self.symbols = list(symbols)
        self.calls = 0

    def __call__(self) -> Symbol:
        index = min(self.calls, len(self.symbols) - 1)
        self.calls += 1
        return self.symbols[index]


def advance(clock: FakeClock, scheduler: TimerScheduler, ms: int, step_ms: int = 10) -> None:
    """Advance time frame by frame, draining the scheduler like the game loop"""
    elapsed = 0
    while elapsed < ms:
        clock.advance_ms(step_ms)
        elapsed += step_ms
        scheduler.run_due()


def run_until_phase(engine: SequenceEngine, clock: FakeClock, scheduler: TimerScheduler,
                    phase: Phase, limit_ms: int = 120000) -> None:
    elapsed = 0
    while engine.phase is not phase:
        if elapsed >= limit_ms:
            raise AssertionError(f"Engine stuck in {engine.phase.name}, expected {phase.name}")
        clock.advance_ms(10)
        elapsed += 10
        scheduler.run_due()


def repeat_sequence(engine: SequenceEngine) -> None:
    for symbol in list(engine.state.sequence):
        assert engine.submit_symbol(symbol)
