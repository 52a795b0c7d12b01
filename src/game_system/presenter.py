"""
Pygame presenter - the sequence engine's window onto screen and speakers
"""

from typing import Callable, TYPE_CHECKING

from display_system.board_view import BoardView, Modal
from .game_state import Phase
from .interfaces import IPresentationAdapter
from .symbols import Symbol

if TYPE_CHECKING:
    from utils import ClassLogger, TimerScheduler
    from .config import DisplayConfig


INTRO_TITLE = "Memory Flow"
INTRO_MESSAGE = ("Watch the sequence of colors, then repeat them in the same order. "
                 "Each round adds a new color!")
INTRO_BUTTON = "Start Playing"
GAME_OVER_TITLE = "Game Over"
GAME_OVER_BUTTON = "Play Again"


def game_over_message(round_number: int, score: int, is_new_best: bool) -> str:
    message = f"You reached round {round_number} with a score of {score}!"
    if is_new_best:
        message += " 🎉 New best score!"
    return message


class PygamePresenter(IPresentationAdapter):
    """
    Turns engine callbacks into BoardView changes and tones.

    Highlights are timed on the shared scheduler. Every highlight captures the
    presenter's epoch; cancel_presentations() bumps it, so a highlight that
    ends after a reset neither touches the board nor calls its completion.
    """

    def __init__(self,
                 sound_controller,
                 scheduler: 'TimerScheduler',
                 display_config: 'DisplayConfig',
                 logger: 'ClassLogger'):
        """
        Args:
            sound_controller: SoundController or MockSoundController
            scheduler: Timer queue drained by the frame loop
            display_config: Feedback timings (press flash, error flash, modal delay)
            logger: ClassLogger instance for logging
        """
        self.sound_controller = sound_controller
        self.scheduler = scheduler
        self.config = display_config
        self.logger = logger
        self.view = BoardView()
        self._phase = Phase.IDLE
        self._epoch = 0

    # ============================================================================
    # IPresentationAdapter
    # ============================================================================

    def present_symbol(self, symbol: Symbol, duration_ms: int, on_complete: Callable[[], None]) -> None:
        epoch = self._epoch
        self.view.lit_tiles.add(symbol)
        self.sound_controller.play_symbol(symbol, duration_ms)

        def finish() -> None:
            if epoch != self._epoch:
                return
            self.view.lit_tiles.discard(symbol)
            on_complete()

        self.scheduler.call_later(duration_ms, finish)

    def report_progress(self, input_length: int, sequence_length: int) -> None:
        self.view.progress = input_length / sequence_length if sequence_length else 0.0

    def report_status(self, message: str) -> None:
        self.view.status = message

    def report_score_update(self, score: int, round_number: int, best_score: int) -> None:
        self.view.score = score
        self.view.round = round_number
        self.view.best_score = best_score

    def report_game_over(self, round_number: int, score: int, is_new_best: bool) -> None:
        epoch = self._epoch
        self.sound_controller.play_fail()
        self.view.lit_tiles.clear()
        self.view.error_flash = True

        def end_flash() -> None:
            if epoch == self._epoch:
                self.view.error_flash = False

        def show_modal() -> None:
            if epoch == self._epoch:
                self.show_modal(GAME_OVER_TITLE, game_over_message(round_number, score, is_new_best),
                                GAME_OVER_BUTTON)

        self.scheduler.call_later(self.config.error_flash_ms, end_flash)
        self.scheduler.call_later(self.config.game_over_modal_delay_ms, show_modal)

    def report_phase(self, phase: Phase) -> None:
        previous = self._phase
        self._phase = phase
        view = self.view
        view.input_enabled = phase is Phase.AWAITING_INPUT
        view.start_enabled = not phase.in_game
        view.start_label = "Playing..." if phase.in_game else "Start Game"

        if phase is Phase.IDLE:
            self.cancel_presentations()
        elif phase is Phase.PRESENTING:
            # A new game must not inherit the previous game over flash and modal
            if not previous.in_game:
                self.cancel_presentations()
            view.modal = None

    # ============================================================================
    # ADAPTER-SIDE FEEDBACK
    # ============================================================================

    def cancel_presentations(self) -> None:
        """Drop every pending highlight, flash and modal timer"""
        self._epoch += 1
        self.view.lit_tiles.clear()
        self.view.error_flash = False
        self.sound_controller.stop_all()

    def press_feedback(self, symbol: Symbol) -> None:
        """Brief highlight and tone for a player press"""
        epoch = self._epoch
        self.view.lit_tiles.add(symbol)
        self.sound_controller.play_press(symbol)

        def release() -> None:
            if epoch == self._epoch:
                self.view.lit_tiles.discard(symbol)

        self.scheduler.call_later(self.config.press_flash_ms, release)

    def show_intro(self) -> None:
        self.show_modal(INTRO_TITLE, INTRO_MESSAGE, INTRO_BUTTON)

    def show_modal(self, title: str, message: str, button_text: str) -> None:
        self.view.modal = Modal(title, message, button_text)
        self.logger.debug(f"Modal shown: {title}")

    def dismiss_modal(self) -> bool:
        """
        Close the modal.

        Returns:
            True if a modal was open
        """
        was_open = self.view.modal is not None
        self.view.modal = None
        return was_open

    def cleanup(self) -> None:
        self.cancel_presentations()
        self.sound_controller.cleanup()
