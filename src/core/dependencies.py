"""Lazily built singletons, injected into the routes (and overridden in tests)."""

from typing import Optional

from src.core.config import get_settings
from src.db.catalog_store import CatalogStore, build_store
from src.services.catalog_service import CatalogService

_store: Optional[CatalogStore] = None


def get_store() -> CatalogStore:
    """The backend is selected once per process; the in-memory cache must survive between requests."""
    global _store
    if _store is None:
        _store = build_store(get_settings())
    return _store


def get_catalog_service() -> CatalogService:
    return CatalogService(get_store(), default_limit=get_settings().default_limit)


def reset_store() -> None:
    """Forget the current store (and with it any in-memory games)."""
    global _store
    _store = None
