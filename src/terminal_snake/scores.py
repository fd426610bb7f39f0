"""Persistent top-N high-score list."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

logger = logging.getLogger(__name__)


class ScoreStoreError(OSError):
    """Raised when the high-score file cannot be written."""


class ScoreStore:
    """Plain-text high-score file, one integer per line, best first.

    :meth:`record` is a read-modify-write of the whole file. It holds a
    lock for the duration but is not reentrant: a store must not be
    recorded into from inside its own ``record`` call.
    """

    def __init__(self, path: str | Path = "high_scores.txt", limit: int = 10) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1.")
        self.path = Path(path)
        self.limit = limit
        self._lock = threading.Lock()

    def load(self) -> list[int]:
        """Return stored scores in file order.

        A missing or unreadable file counts as an empty list.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError):
            logger.warning("Could not read high scores from %s.", self.path)
            return []

        scores: list[int] = []
        for token in text.split():
            try:
                scores.append(int(token))
            except ValueError:
                logger.warning(
                    "Skipping malformed high score %r in %s.", token, self.path,
                )
        return scores

    def top(self) -> list[int]:
        """Return the stored scores sorted best first, truncated."""
        return sorted(self.load(), reverse=True)[: self.limit]

    def record(self, score: int) -> list[int]:
        """Add *score*, rewrite the file and return the new top list."""
        with self._lock:
            scores = self.load()
            scores.append(score)
            scores.sort(reverse=True)
            del scores[self.limit:]
            tmp = self.path.with_name(f"{self.path.name}.tmp")
            try:
                tmp.write_text("".join(f"{s}\n" for s in scores), encoding="utf-8")
                os.replace(tmp, self.path)
            except OSError as exc:
                tmp.unlink(missing_ok=True)
                raise ScoreStoreError(
                    f"Could not write high scores to {self.path}: {exc}"
                ) from exc
        logger.info("Recorded score %d to %s.", score, self.path)
        return scores
