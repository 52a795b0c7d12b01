"""
Pytest fixtures for Memory Flow tests.
"""

import logging
from typing import Optional

import pytest

from game_system import EngineConfig, SequenceEngine, Symbol
from storage import InMemoryBestScoreStore
from utils import HybridLogger, TimerScheduler

from game_helpers import FakeClock, RecordingPresenter, ScriptedSymbols


@pytest.fixture
def hybrid_logger():
    hybrid = HybridLogger("MemoryFlowTest", log_to_file=False, use_colors=False)
    yield hybrid
    hybrid.cleanup()


@pytest.fixture
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock) -> TimerScheduler:
    return TimerScheduler(clock=clock)


@pytest.fixture
def presenter(scheduler) -> RecordingPresenter:
    return RecordingPresenter(scheduler)


@pytest.fixture
def store() -> InMemoryBestScoreStore:
    return InMemoryBestScoreStore()


@pytest.fixture
def script() -> ScriptedSymbols:
    return ScriptedSymbols([
        Symbol.BLUE, Symbol.RED, Symbol.YELLOW, Symbol.GREEN,
        Symbol.BLUE, Symbol.BLUE, Symbol.GREEN, Symbol.RED,
    ])


@pytest.fixture
def make_engine(presenter, store, scheduler, logger, script):
    """Factory so tests can override config, store or presenter"""

    def factory(config: Optional[EngineConfig] = None,
                score_store=None,
                adapter=None,
                symbol_source=None) -> SequenceEngine:
        return SequenceEngine(
            presenter=adapter or presenter,
            score_store=score_store or store,
            scheduler=scheduler,
            logger=logger,
            config=config,
            symbol_source=symbol_source or script
        )

    return factory


@pytest.fixture
def engine(make_engine) -> SequenceEngine:
    return make_engine()


