"""
Sequence engine - round/sequence state machine of the memory game
"""

import random
from typing import Callable, Optional, TYPE_CHECKING

from storage.errors import StorageError
from .config import EngineConfig
from .game_state import GameState, Phase
from .symbols import ALL_SYMBOLS, Symbol

if TYPE_CHECKING:
    from storage.interfaces import IBestScoreStore
    from utils import ClassLogger, TimerScheduler
    from .interfaces import IPresentationAdapter


STATUS_WELCOME = "Watch the pattern and repeat it"
STATUS_YOUR_TURN = "Your turn! Repeat the sequence"
STATUS_GAME_OVER = "Game Over!"


class SequenceEngine:
    """
    Owns the GameState and drives a game through its phases.

    Phases:
    - IDLE → PRESENTING on start_game()
    - PRESENTING → AWAITING_INPUT once every symbol has been shown
    - AWAITING_INPUT → ROUND_COMPLETE when the round is repeated correctly
    - AWAITING_INPUT → GAME_OVER on the first wrong symbol
    - ROUND_COMPLETE → PRESENTING after a short pause
    - any phase → IDLE on reset_game()

    All waiting happens on the scheduler. Every continuation captures the
    epoch it was created in; start_game() and reset_game() bump the epoch, so
    a timer or presentation completion that fires after a reset does nothing.
    """

    def __init__(self,
                 presenter: 'IPresentationAdapter',
                 score_store: 'IBestScoreStore',
                 scheduler: 'TimerScheduler',
                 logger: 'ClassLogger',
                 config: Optional[EngineConfig] = None,
                 symbol_source: Optional[Callable[[], Symbol]] = None):
        """
        Args:
            presenter: Adapter that shows symbols and reports to the player
            score_store: Persistence for the best score
            scheduler: Timer queue drained by the frame loop
            logger: ClassLogger instance for logging
            config: Timing and scoring rules (defaults to EngineConfig())
            symbol_source: Returns the next symbol to append; uniform random by default
        """
        self.presenter = presenter
        self.score_store = score_store
        self.scheduler = scheduler
        self.logger = logger
        self.config = config or EngineConfig()

        if symbol_source is None:
            rng = random.Random()
            symbol_source = lambda: rng.choice(ALL_SYMBOLS)
        self.symbol_source = symbol_source

        self.state = GameState(initial_speed_ms=self.config.initial_speed_ms)
        self.state.best_score = self._load_best_score()
        self._epoch = 0

        self.logger.info(f"SequenceEngine initialized: best score {self.state.best_score}")

    # ============================================================================
    # PUBLIC METHODS
    # ============================================================================

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def accepts_input(self) -> bool:
        return self.state.phase is Phase.AWAITING_INPUT

    def start_game(self) -> bool:
        """
        Start a new game from IDLE or GAME_OVER.

        Returns:
            True if a game was started, False if one is already running
        """
        if self.state.phase.in_game:
            self.logger.debug(f"Ignoring start request during {self.state.phase.name}")
            return False

        self._epoch += 1
        self.state.reset_for_new_game()
        self.logger.info(f"Starting new game (epoch {self._epoch})")
        self._extend_and_present()
        return True

    def reset_game(self) -> None:
        """Abandon any running game and return to IDLE without presenting anything"""
        self._epoch += 1
        self.state.reset_for_new_game()
        self._transition_to(Phase.IDLE)

        self.presenter.report_score_update(self.state.score, self.state.round, self.state.best_score)
        self.presenter.report_progress(0, 0)
        self.presenter.report_status(STATUS_WELCOME)
        self.logger.info(f"Game reset (epoch {self._epoch})")

    def submit_symbol(self, symbol: Symbol) -> bool:
        """
        Feed one player symbol into the current round.

        Returns:
            True if the symbol was consumed, False if input is not accepted right now
        """
        if not self.accepts_input:
            self.logger.debug(f"Ignoring {symbol.name} during {self.state.phase.name}")
            return False

        state = self.state
        index = len(state.player_input)
        state.player_input.append(symbol)

        if not state.input_is_prefix:
            expected = state.sequence[index]
            self.logger.info(f"Wrong symbol at position {index + 1}: got {symbol.name}, expected {expected.name}")
            self._game_over()
            return True

        self.presenter.report_progress(len(state.player_input), len(state.sequence))

        if state.round_is_complete:
            self._complete_round()
        return True

    # ============================================================================
    # PHASE STEPS
    # ============================================================================

    def _extend_and_present(self) -> None:
        """Append a symbol, apply the speed rule and schedule playback of the whole sequence"""
        state = self.state
        state.sequence.append(self.symbol_source())
        state.round += 1
        if state.round % self.config.speed_step_every_rounds == 0:
            state.speed_ms = max(self.config.min_speed_ms, state.speed_ms - self.config.speed_step_ms)

        self._transition_to(Phase.PRESENTING)
        self.logger.debug(f"Round {state.round}: {[s.name for s in state.sequence]} at {state.speed_ms}ms")

        self.presenter.report_score_update(state.score, state.round, state.best_score)
        self.presenter.report_status(f"Round {state.round} - Watch carefully...")
        self._call_later(self.config.lead_in_ms, lambda: self._present_step(0))

    def _present_step(self, index: int) -> None:
        state = self.state
        if state.phase is not Phase.PRESENTING:
            return

        if index >= len(state.sequence):
            self._begin_input()
            return

        epoch = self._epoch

        def on_symbol_done() -> None:
            if epoch != self._epoch:
                self.logger.debug(f"Dropping stale presentation completion (epoch {epoch})")
                return
            self._call_later(self.config.symbol_gap_ms, lambda: self._present_step(index + 1))

        self.presenter.present_symbol(state.sequence[index], state.speed_ms, on_symbol_done)

    def _begin_input(self) -> None:
        self.state.player_input = []
        self._transition_to(Phase.AWAITING_INPUT)
        self.presenter.report_progress(0, len(self.state.sequence))
        self.presenter.report_status(STATUS_YOUR_TURN)

    def _complete_round(self) -> None:
        state = self.state
        state.score += state.round * self.config.points_per_round
        self._transition_to(Phase.ROUND_COMPLETE)
        self.logger.info(f"Round {state.round} complete, score {state.score}")

        self.presenter.report_score_update(state.score, state.round, state.best_score)
        self._call_later(self.config.round_complete_delay_ms, self._next_round)

    def _next_round(self) -> None:
        if self.state.phase is Phase.ROUND_COMPLETE:
            self._extend_and_present()

    def _game_over(self) -> None:
        state = self.state
        is_new_best = state.score > state.best_score
        if is_new_best:
            state.best_score = state.score
            self._persist_best_score(state.best_score)

        self._transition_to(Phase.GAME_OVER)
        self.logger.info(
            f"Game over at round {state.round} with score {state.score}"
            f"{' (new best)' if is_new_best else ''}"
        )

        self.presenter.report_score_update(state.score, state.round, state.best_score)
        self.presenter.report_progress(0, len(state.sequence))
        self.presenter.report_status(STATUS_GAME_OVER)
        self.presenter.report_game_over(state.round, state.score, is_new_best)

    # ============================================================================
    # HELPERS
    # ============================================================================

    def _call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        """Schedule callback, dropping it if the epoch changes before it fires"""
        epoch = self._epoch

        def guarded() -> None:
            if epoch != self._epoch:
                self.logger.debug(f"Dropping stale timer (epoch {epoch}, now {self._epoch})")
                return
            callback()

        self.scheduler.call_later(delay_ms, guarded)

    def _transition_to(self, phase: Phase) -> None:
        old_phase = self.state.phase
        self.state.phase = phase
        if old_phase is not phase:
            self.logger.info(f"Phase transition: {old_phase.name} → {phase.name}")
        self.presenter.report_phase(phase)

    def _load_best_score(self) -> int:
        try:
            return max(0, int(self.score_store.load_best_score()))
        except StorageError as e:
            self.logger.warning(f"Best score unavailable, starting from 0: {e}")
            return 0

    def _persist_best_score(self, best_score: int) -> None:
        try:
            self.score_store.persist_best_score(best_score)
        except StorageError as e:
            self.logger.warning(f"Could not save best score {best_score}: {e}")
