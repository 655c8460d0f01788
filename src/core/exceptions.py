"""
Exceptions raised across layers.

Every error carries the HTTP status it should be reported with, so the API layer can map any CatalogError to a response without
knowing the concrete type.
"""

from typing import Optional

INTERNAL_SERVER_ERROR = "Internal Server Error"


class CatalogError(Exception):
    """Top-level error for the games catalog. Unclassified failures are reported as a server error."""

    status_code: int = 500
    default_message: str = INTERNAL_SERVER_ERROR

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(CatalogError):
    """No game matches the requested ID."""

    status_code = 404
    default_message = "Game not found"


class ConflictError(CatalogError):
    """A game with the requested ID already exists."""

    status_code = 400
    default_message = "Game already exists"


class BadRequestError(CatalogError):
    """The request cannot be interpreted (missing ids, invalid pagination, ...)."""

    status_code = 400
    default_message = "Bad Request"


class PersistenceError(CatalogError):
    """None of the candidate locations accepted the collection."""

    status_code = 500
    default_message = "Unable to write games file to disk"
