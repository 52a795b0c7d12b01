"""
Main game manager - orchestrates input, the sequence engine, timers and rendering
"""

import time
from typing import TYPE_CHECKING

import psutil

from input_system.commands import Command
from utils import OnceInMs

if TYPE_CHECKING:
    from display_system.interfaces import IBoardDisplay
    from input_system.input_state import InputState
    from input_system.interfaces import IInputReader
    from utils import ClassLogger, TimerScheduler
    from .presenter import PygamePresenter
    from .sequence_engine import SequenceEngine


class GameManager:
    """
    Runs the frame loop.

    Each frame:
    1. Read the frame's input
    2. Forward commands and symbols to the engine
    3. Run due timers (presentation steps, pacing delays, feedback)
    4. Render the board
    """

    def __init__(self,
                 input_reader: 'IInputReader',
                 display: 'IBoardDisplay',
                 presenter: 'PygamePresenter',
                 engine: 'SequenceEngine',
                 scheduler: 'TimerScheduler',
                 logger: 'ClassLogger',
                 frame_duration_ms: float = 16.67):
        """
        Args:
            input_reader: Source of per-frame InputState
            display: Board display, rendered once per frame
            presenter: Presenter whose BoardView is rendered
            engine: Sequence engine receiving player actions
            scheduler: Timer queue drained once per frame
            logger: Logger for debugging and monitoring
            frame_duration_ms: Target frame duration in milliseconds
        """
        self.input_reader = input_reader
        self.display = display
        self.presenter = presenter
        self.engine = engine
        self.scheduler = scheduler
        self.logger = logger
        self.target_frame_duration = frame_duration_ms / 1000.0
        self.running = True

        self._usage_monitor = OnceInMs(60000)  # Log every 60 seconds
        self._process = psutil.Process()

        self.logger.info(f"GameManager initialized: {frame_duration_ms}ms frame duration")

    def run_game_loop(self) -> None:
        """
        Run the game loop with automatic frame duration limiting.

        Returns when the player quits; cleans up in all cases.
        """
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration * 1000)}ms frame duration")
        self.presenter.show_intro()

        try:
            while self.running:
                frame_start = time.monotonic()

                self.update()

                sleep_time = self.target_frame_duration - (time.monotonic() - frame_start)
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            self.logger.flush()
            raise
        finally:
            self.stop()

    def update(self) -> None:
        """One frame: input, timers, render"""
        if self._usage_monitor.should_execute():
            self._log_usage()

        input_state = self.input_reader.read_input()
        self.handle_input(input_state)

        self.scheduler.run_due()

        self.display.render(self.presenter.view)

    def handle_input(self, input_state: 'InputState') -> None:
        """Dispatch one frame of input to the presenter and engine"""
        if input_state.quit_requested:
            self.logger.info("Quit requested")
            self.running = False
            return

        for command in input_state.commands:
            if command is Command.START:
                self.presenter.dismiss_modal()
                self.engine.start_game()
            elif command is Command.RESET:
                self.engine.reset_game()
            elif command is Command.DISMISS_MODAL:
                self.presenter.dismiss_modal()
                if not self.engine.phase.in_game:
                    self.engine.start_game()

        for symbol in input_state.pressed_symbols:
            if not self.engine.accepts_input:
                self.logger.debug(f"Press of {symbol.name} ignored in {self.engine.phase.name}")
                continue
            self.presenter.press_feedback(symbol)
            self.engine.submit_symbol(symbol)

    def stop(self) -> None:
        """Stop the game and release audio, window and input resources"""
        self.running = False
        self.scheduler.clear()
        self.presenter.cleanup()
        self.input_reader.cleanup()
        self.display.cleanup()
        self.logger.info("Game stopped")

    def _log_usage(self) -> None:
        """Log process memory and CPU usage"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            process_cpu_percent = self._process.cpu_percent(interval=None)
            self.logger.info(
                f"💾 Memory - Process: {process_mb:.1f}MB | "
                f"⚙️  CPU - Process: {process_cpu_percent:.1f}% | "
                f"Pending timers: {self.scheduler.pending_count()}"
            )
        except psutil.Error as e:
            self.logger.warning(f"Failed to log system usage: {e}")
