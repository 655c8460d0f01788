"""Loading of the read-only dataset shipped with the deployment."""

import json
import logging
from pathlib import Path

from src.core.models import Collection

logger = logging.getLogger(__name__)


def read_collection(path: Path) -> Collection:
    """Parse a games file. Raises OSError / ValueError if the file cannot be read or does not hold a JSON array."""
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"Expected a JSON array of games in {path}, got {type(raw).__name__}")
    return raw


def load_snapshot(path: Path) -> Collection:
    """
    Load the bundled snapshot.

    In a correctly packaged deployment this always succeeds. A failure is logged and reported as an empty collection, so that a
    read can still be served from the other sources.
    """
    try:
        games = read_collection(path)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load bundled snapshot from {path}: {e}")
        return []
    logger.debug(f"Loaded {len(games)} games from bundled snapshot {path}")
    return games
