"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import json
from pathlib import Path

import pytest

from src.core.models import Collection

from tests.factories import make_game


@pytest.fixture
def sample_games() -> Collection:
    return [
        make_game(
            "1",
            names={"en": "Dragon Quest", "ja": "ドラゴンクエスト"},
            category="RPG",
            description="Classic turn-based adventure.",
        ),
        make_game(
            "2",
            names={"en": "Tetris"},
            category="Puzzle",
            description="Falling blocks.",
        ),
        make_game(
            "3",
            names={"en": "Monster Hunter"},
            category="Action RPG",
            description="Hunt elder dragons with friends.",
        ),
        make_game(
            "4",
            names={"en": "Catan"},
            category="Board Game",
            description="Trade and build on an island.",
        ),
    ]


@pytest.fixture
def snapshot_file(tmp_path: Path, sample_games: Collection) -> Path:
    """Bundled snapshot holding the sample games, in its own folder."""
    bundle = tmp_path / "bundle"
    bundle.mkdir()
    path = bundle / "games.json"
    path.write_text(json.dumps(sample_games), encoding="utf-8")
    return path


@pytest.fixture
def blocked_path(tmp_path: Path) -> Path:
    """A path that can never be written: its parent is a regular file, not a folder."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    return blocker / "games.json"
