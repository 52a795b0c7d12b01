"""
Best score stores - persistence for the single best-score scalar
"""

import json
import os
from pathlib import Path
from typing import Optional

from .interfaces import IBestScoreStore
from .errors import StorageError


BEST_SCORE_KEY = "memoryFlowBest"


class JsonFileBestScoreStore(IBestScoreStore):
    """
    Stores the best score in a small JSON object on disk.

    The file holds {"memoryFlowBest": <int>}; other keys are preserved on
    write. A missing file or key reads as 0.
    """

    def __init__(self, path: str, logger, key: str = BEST_SCORE_KEY):
        """
        Args:
            path: Location of the JSON file (parent directories are created on write)
            logger: ClassLogger instance for logging
            key: Namespaced key the score is stored under
        """
        self.path = Path(path)
        self.key = key
        self.logger = logger

    def _read_document(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                document = json.load(handle)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read best score from {self.path}: {e}") from e

        if not isinstance(document, dict):
            raise StorageError(f"Unexpected content in {self.path}: expected a JSON object")
        return document

    def load_best_score(self) -> int:
        value = self._read_document().get(self.key, 0)
        try:
            best_score = int(value)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Stored best score {value!r} is not an integer") from e

        # Negative values can only come from a hand-edited file
        best_score = max(0, best_score)
        self.logger.debug(f"Loaded best score {best_score} from {self.path}")
        return best_score

    def persist_best_score(self, best_score: int) -> None:
        try:
            document = self._read_document()
        except StorageError as e:
            self.logger.warning(f"Overwriting unreadable score file: {e}")
            document = {}

        document[self.key] = int(best_score)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as handle:
                json.dump(document, handle)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageError(f"Cannot write best score to {self.path}: {e}") from e

        self.logger.info(f"Best score {best_score} saved to {self.path}")


class InMemoryBestScoreStore(IBestScoreStore):
    """Volatile store, used in tests and when no score file is wanted"""

    def __init__(self, best_score: int = 0, fail_reads: bool = False, fail_writes: bool = False):
        self.best_score = best_score
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.write_count = 0
        self.last_written: Optional[int] = None

    def load_best_score(self) -> int:
        if self.fail_reads:
            raise StorageError("Best score store is not readable")
        return self.best_score

    def persist_best_score(self, best_score: int) -> None:
        if self.fail_writes:
            raise StorageError("Best score store is not writable")
        self.best_score = best_score
        self.last_written = best_score
        self.write_count += 1
