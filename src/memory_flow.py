#!/usr/bin/env python3
"""
Memory Flow - sequence-memory game

Watch the colors light up, then repeat them in order. Each round adds one
more color and every five rounds the playback gets faster.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

import pygame

from audio_system import MockSoundController, SoundController
from display_system import BoardRenderer
from game_system import ALL_SYMBOLS, GameConfig, SequenceEngine
from game_system.config import DEFAULT_BEST_SCORE_PATH
from game_system.game_manager import GameManager
from game_system.presenter import PygamePresenter
from input_system import PygameInputReader
from storage import JsonFileBestScoreStore
from utils import HybridLogger, TimerScheduler


LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="memory-flow", description="Sequence-memory game")
    parser.add_argument("--mock-audio", action="store_true", help="run without opening an audio device")
    parser.add_argument("--log-level", choices=sorted(LOG_LEVELS), default="info")
    parser.add_argument("--log-dir", default="logs", help="directory for log files")
    parser.add_argument("--best-score-file", default=DEFAULT_BEST_SCORE_PATH,
                        help="JSON file holding the best score")
    parser.add_argument("--fps", type=float, default=60.0, help="target frames per second")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible symbol sequence")
    return parser.parse_args(argv)


def create_config(args: argparse.Namespace) -> GameConfig:
    """Build and validate configuration from command line arguments"""
    if args.fps <= 0:
        raise ValueError(f"FPS must be positive, got {args.fps}")
    config = GameConfig(
        frame_duration_ms=1000.0 / args.fps,
        best_score_path=args.best_score_file,
        seed=args.seed
    )
    config.audio.mock_audio = args.mock_audio
    config.validate()
    return config


def create_sound_controller(config: GameConfig, hybrid_logger: HybridLogger, level: int):
    """Real mixer when possible, mock controller otherwise"""
    audio_logger = hybrid_logger.get_class_logger("SoundController", level)
    if config.audio.mock_audio:
        return MockSoundController(config.audio, audio_logger)
    try:
        return SoundController(config.audio, audio_logger)
    except pygame.error as e:
        audio_logger.warning(f"Audio unavailable ({e}), continuing without sound")
        return MockSoundController(config.audio, audio_logger)


def create_game_system(config: GameConfig, hybrid_logger: HybridLogger, level: int) -> GameManager:
    """
    Wire the complete game together.

    Returns:
        GameManager: Ready to run_game_loop()
    """
    scheduler = TimerScheduler()

    sound_controller = create_sound_controller(config, hybrid_logger, level)
    display = BoardRenderer(config.display, hybrid_logger.get_class_logger("BoardRenderer", level))
    presenter = PygamePresenter(
        sound_controller=sound_controller,
        scheduler=scheduler,
        display_config=config.display,
        logger=hybrid_logger.get_class_logger("Presenter", level)
    )
    input_reader = PygameInputReader(display, hybrid_logger.get_class_logger("InputReader", level))

    score_store = JsonFileBestScoreStore(
        config.best_score_path,
        hybrid_logger.get_class_logger("BestScoreStore", level)
    )

    rng = random.Random(config.seed)
    engine = SequenceEngine(
        presenter=presenter,
        score_store=score_store,
        scheduler=scheduler,
        logger=hybrid_logger.get_class_logger("SequenceEngine", level),
        config=config.engine,
        symbol_source=lambda: rng.choice(ALL_SYMBOLS)
    )
    engine.reset_game()

    return GameManager(
        input_reader=input_reader,
        display=display,
        presenter=presenter,
        engine=engine,
        scheduler=scheduler,
        logger=hybrid_logger.get_class_logger("GameManager", level),
        frame_duration_ms=config.frame_duration_ms
    )


def run_main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    level = LOG_LEVELS[args.log_level]

    hybrid_logger = HybridLogger("MemoryFlow", log_dir=args.log_dir)
    logger = hybrid_logger.get_main_logger(level)

    try:
        config = create_config(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        hybrid_logger.cleanup()
        return 2

    try:
        logger.info("Memory Flow started")
        game_manager = create_game_system(config, hybrid_logger, level)
        game_manager.run_game_loop()
        return 0
    except Exception as e:
        logger.error(f"Memory Flow crashed: {e}", exception=e)
        return 1
    finally:
        logger.info("Memory Flow stopped")
        pygame.quit()
        hybrid_logger.cleanup()


if __name__ == "__main__":
    sys.exit(run_main())
