"""
Storage Package

Persistence for the best score, the only state that survives a restart.
"""

from .errors import StorageError
from .interfaces import IBestScoreStore
from .best_score_store import JsonFileBestScoreStore, InMemoryBestScoreStore, BEST_SCORE_KEY

__all__ = [
    "StorageError",
    "IBestScoreStore",
    "JsonFileBestScoreStore",
    "InMemoryBestScoreStore",
    "BEST_SCORE_KEY"
]
