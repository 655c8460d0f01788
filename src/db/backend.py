"""Protocol backend (one implementation per kind of host environment)"""

from typing import Protocol

from src.core.models import Collection


class PersistenceBackend(Protocol):
    """Where the full collection of games is kept between requests."""

    def read(self, snapshot: Collection) -> Collection:
        """Return the current collection. The bundled snapshot is passed in so the backend can fall back to (or seed from) it."""
        ...

    def write(self, games: Collection) -> None:
        """Replace the whole collection. Raise PersistenceError if it could not be stored."""
        ...
