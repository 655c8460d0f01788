"""Settings read from the environment (prefix GAMES_) or a local .env file."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.shared_types import Environment

# Resolve repository root (project root, not the Python package root)
REPO_ROOT = Path(__file__).resolve().parents[2]
BUNDLED_SNAPSHOT = REPO_ROOT / "data" / "games.json"

DATA_FILE_NAME = "games.json"


def default_candidate_paths() -> list[Path]:
    """
    Locations a writable games file is most likely to live, most likely first.

    The working directory differs between a local checkout, a build output folder (.output/) and a serverless bundle
    (/var/task), so every usual layout is tried. /tmp is the last resort: writable nearly everywhere, but ephemeral.
    """
    cwd = Path.cwd()
    return [
        cwd / "data" / DATA_FILE_NAME,
        cwd / "public" / "data" / DATA_FILE_NAME,
        cwd / "public" / DATA_FILE_NAME,
        cwd / ".output" / "server" / "data" / DATA_FILE_NAME,
        cwd / ".output" / "public" / "data" / DATA_FILE_NAME,
        cwd / ".output" / "public" / DATA_FILE_NAME,
        BUNDLED_SNAPSHOT,
        Path("/var/task/public/data") / DATA_FILE_NAME,
        Path("/var/task/public") / DATA_FILE_NAME,
        Path("/tmp") / DATA_FILE_NAME,
    ]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GAMES_", env_file=".env", extra="ignore")

    environment: Environment = Environment.DEVELOPMENT
    snapshot_path: Path = BUNDLED_SNAPSHOT
    candidate_paths: list[Path] = Field(default_factory=default_candidate_paths)
    default_limit: PositiveInt = 10
    log_level: str = "INFO"

    @property
    def is_restricted(self) -> bool:
        return self.environment.is_restricted


@lru_cache
def get_settings() -> Settings:
    return Settings()
