"""Implementation of PersistenceBackend for hosts without a durable filesystem (serverless)."""

import logging
from copy import deepcopy

from src.core.models import Collection

logger = logging.getLogger(__name__)


class EphemeralCache:
    """
    Games kept in process memory only.

    The bundled snapshot is immutable per deployment, so the only way newer data exists is a write made earlier in this same
    process. Separate instances do not see each other's writes.
    """

    def __init__(self) -> None:
        self._games: tuple[dict, ...] = ()

    def read(self, snapshot: Collection) -> Collection:
        """Prefer the cache whenever it holds games, otherwise seed it from the snapshot."""
        if self._games:
            logger.debug(f"Using in-memory store: {len(self._games)} games")
            return deepcopy(list(self._games))

        logger.info(f"In-memory store empty, seeding from bundled snapshot: {len(snapshot)} games")
        self._games = tuple(deepcopy(snapshot))
        return snapshot

    def write(self, games: Collection) -> None:
        """Swap in a new snapshot of the collection (single assignment, no file I/O)."""
        self._games = tuple(deepcopy(games))
        logger.info(f"Updated in-memory store with {len(games)} games")

    def clear(self) -> None:
        self._games = ()

    def __len__(self) -> int:
        return len(self._games)
