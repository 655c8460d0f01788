"""Implementation of PersistenceBackend writing the collection as a JSON document to the first usable candidate path."""

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from src.core.exceptions import PersistenceError
from src.core.models import Collection
from src.db.snapshot import read_collection

logger = logging.getLogger(__name__)


class FileBackend:
    """
    Data stored in a JSON file, at one of several candidate locations.

    Candidates are tried in order, both for reading and for writing, except that the file this process last wrote is read
    first. Parent directories are never created: a candidate whose folder does not exist is simply not the right location for
    this deployment.
    """

    def __init__(self, candidate_paths: Sequence[Path]) -> None:
        if not candidate_paths:
            raise ValueError("FileBackend needs at least one candidate path.")
        self.candidate_paths = [Path(p) for p in candidate_paths]
        # Where the last successful write went; read from there first.
        self._active_path: Optional[Path] = None

    def read(self, snapshot: Collection) -> Collection:
        """
        The file last written by this process wins, then the first readable candidate.

        The bundled snapshot is returned when none of them is readable.
        """
        for path in self._read_order():
            if not path.is_file():
                continue
            try:
                games = read_collection(path)
            except (OSError, ValueError) as e:
                logger.warning(f"Skipping unreadable games file {path}: {e}")
                continue
            logger.debug(f"Read {len(games)} games from {path}")
            return games
        return snapshot

    def write(self, games: Collection) -> None:
        """Write the full collection to the first candidate that accepts it."""
        document = json.dumps(games, indent=2, ensure_ascii=False)
        for path in self.candidate_paths:
            try:
                _replace_file(path, document)
            except OSError as e:
                logger.info(f"Failed to write to {path}: {e}")
                continue
            self._active_path = path
            logger.info(f"Successfully wrote {len(games)} games to: {path}")
            return

        logger.error(f"Unable to write games file to any of {len(self.candidate_paths)} candidate paths")
        raise PersistenceError()

    def _read_order(self) -> list[Path]:
        if self._active_path is None:
            return self.candidate_paths
        return [self._active_path] + [p for p in self.candidate_paths if p != self._active_path]

    def __repr__(self) -> str:
        return f"FileBackend(candidate_paths={self.candidate_paths!r})"


def _replace_file(path: Path, document: str) -> None:
    """Write next to the target, then swap it in, so readers never see a half-written file."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(document)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
