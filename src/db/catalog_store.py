"""Catalog store: combines the bundled snapshot with the backend selected for this host environment."""

import logging
from pathlib import Path

from src.core.config import Settings
from src.core.models import Collection
from src.db.backend import PersistenceBackend
from src.db.file_backend import FileBackend
from src.db.memory_backend import EphemeralCache
from src.db.snapshot import load_snapshot

logger = logging.getLogger(__name__)


class CatalogStore:
    """Every read loads the full collection, every write replaces it."""

    def __init__(self, backend: PersistenceBackend, snapshot_path: Path) -> None:
        self.backend = backend
        self.snapshot_path = snapshot_path

    def read(self) -> Collection:
        """Current collection. Never raises for missing data, an empty list is the last resort."""
        snapshot = load_snapshot(self.snapshot_path)
        return self.backend.read(snapshot)

    def write(self, games: Collection) -> None:
        """Persist the full collection. Raises PersistenceError when it could not be stored."""
        self.backend.write(games)


def build_backend(settings: Settings) -> PersistenceBackend:
    """Select the backend once, at start-up, from configuration."""
    if settings.is_restricted:
        logger.info(f"Environment {settings.environment!s}: keeping games in process memory")
        return EphemeralCache()
    logger.info(f"Environment {settings.environment!s}: writing games to the first usable candidate file")
    return FileBackend(settings.candidate_paths)


def build_store(settings: Settings) -> CatalogStore:
    return CatalogStore(build_backend(settings), settings.snapshot_path)
