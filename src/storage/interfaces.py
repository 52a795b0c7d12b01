"""
Abstract interface for best score persistence
"""

from abc import ABC, abstractmethod


class IBestScoreStore(ABC):
    """
    Persistence for the best score scalar.

    Implementations raise StorageError when the backing store is unreadable
    or unwritable; callers decide how to degrade.
    """

    @abstractmethod
    def load_best_score(self) -> int:
        """
        Returns:
            Stored best score, 0 if nothing was stored yet
        """
        pass

    @abstractmethod
    def persist_best_score(self, best_score: int) -> None:
        pass
