"""Orchestration of communication from API router to the catalog store (and the reverse direction)."""

import logging
import math
import time

from src.api.models import (
    CreateGameRequest,
    DeleteGamesRequest,
    DeleteGamesResponse,
    GameListResponse,
    GameResponse,
    ListGamesRequest,
    Pagination,
    UpdateGameRequest,
)
from src.core.exceptions import BadRequestError, ConflictError, NotFoundError
from src.core.models import Collection, GameId, GamePage, GameRecord, timestamp
from src.db.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


class CatalogService:
    """Orchestration of layers for the games catalog."""

    def __init__(self, store: CatalogStore, default_limit: int = DEFAULT_LIMIT) -> None:
        self.store = store
        self.default_limit = default_limit

    # -- API routes logic ---
    def get_game(self, game_id: GameId) -> GameRecord:
        """Look up a single game by exact ID."""
        games = self.store.read()
        return self._find_game(games, game_id)

    def list_games(self, request: ListGamesRequest) -> GameListResponse:
        """Filter by category, then by search term, and return the requested page."""
        games = self.store.read()
        logger.debug(f"Listing games: {len(games)} in total")

        filtered = filter_by_search(filter_by_category(games, request.category), request.search)
        result = paginate(
            filtered,
            page=request.page or DEFAULT_PAGE,
            limit=request.limit or self.default_limit,
        )
        return GameListResponse(
            games=result.games,
            pagination=Pagination(
                page=result.page,
                limit=result.limit,
                total=result.total,
                total_pages=result.total_pages,
            ),
        )

    def create_game(self, request: CreateGameRequest) -> GameResponse:
        """Add a game, assigning an ID when the client did not supply one."""
        games = self.store.read()

        game_id = request.id if request.id is not None else next_game_id(games)
        if any(g.get("id") == game_id for g in games):
            raise ConflictError(f"Game with ID '{game_id}' already exists")

        now = timestamp()
        new_game = {**request.fields(), "id": game_id, "createdAt": now, "updatedAt": now}
        games.append(new_game)

        # Write before responding: a failed write must not look like a created game.
        self.store.write(games)
        logger.info(f"Game created: {game_id}")
        return GameResponse(game=new_game)

    def update_game(self, request: UpdateGameRequest) -> GameResponse:
        """Shallow merge of the supplied fields over the stored game."""
        games = self.store.read()
        if request.id is None:
            raise NotFoundError()
        index = self._find_index(games, request.id)

        changes = request.fields()
        changes.pop("createdAt", None)
        updated = {**games[index], **changes, "updatedAt": timestamp()}
        games[index] = updated

        self.store.write(games)
        logger.info(f"Game updated: {request.id}")
        return GameResponse(game=updated)

    def delete_games(self, request: DeleteGamesRequest) -> DeleteGamesResponse:
        """
        Delete one game (`id`) or several (`ids`).
        ----
        Unknown IDs in a bulk delete are ignored; the count only covers games that existed.
        """
        games = self.store.read()

        if request.ids is not None:
            to_delete = set(request.ids)
            remaining = [g for g in games if g.get("id") not in to_delete]
        elif request.id is not None:
            remaining = [g for g in games if g.get("id") != request.id]
            if len(remaining) == len(games):
                raise NotFoundError()
        else:
            raise BadRequestError("Missing id or ids parameter")

        self.store.write(remaining)
        deleted_count = len(games) - len(remaining)
        logger.info(f"Deleted {deleted_count} game(s), {len(remaining)} remaining")
        return DeleteGamesResponse(deleted_count=deleted_count)

    # -- Internal helpers --
    def _find_index(self, games: Collection, game_id: GameId) -> int:
        """Position of the game in the collection, raise error if it is not there."""
        for index, game in enumerate(games):
            if game.get("id") == game_id:
                return index
        logger.warning(f"Game not found with ID: {game_id}")
        raise NotFoundError()

    def _find_game(self, games: Collection, game_id: GameId) -> GameRecord:
        return games[self._find_index(games, game_id)]


# -- Filtering, pagination and ID generation --
def filter_by_category(games: Collection, category: str | None) -> Collection:
    """Case-insensitive substring match against the game's category."""
    if not category:
        return games
    needle = category.lower()
    return [g for g in games if needle in _text(g.get("category")).lower()]


def filter_by_search(games: Collection, search: str | None) -> Collection:
    """Case-insensitive substring match against any of the game's names, or its description."""
    if not search:
        return games
    needle = search.lower()

    def _matches(game: GameRecord) -> bool:
        names = game.get("names")
        values = names.values() if isinstance(names, dict) else []
        if any(needle in _text(name).lower() for name in values):
            return True
        return needle in _text(game.get("description")).lower()

    return [g for g in games if _matches(g)]


def paginate(games: Collection, page: int, limit: int) -> GamePage:
    """Slice out one page (1-based). Pages past the end are empty."""
    offset = (page - 1) * limit
    total = len(games)
    return GamePage(
        games=games[offset : offset + limit],
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
    )


def next_game_id(games: Collection) -> GameId:
    """
    Continue the numeric ID sequence: max + 1 over the IDs that parse as integers.

    An empty catalog starts at "1". If no ID is numeric there is no sequence to continue, and a timestamp token is used instead.
    """
    if not games:
        return "1"

    numeric_ids = [n for n in (_as_int(g.get("id")) for g in games) if n is not None]
    if numeric_ids:
        return str(max(numeric_ids) + 1)

    existing = {g.get("id") for g in games}
    millis = time.time_ns() // 1_000_000
    while f"GAME_{millis}" in existing:
        millis += 1
    return f"GAME_{millis}"


def _as_int(value: object) -> int | None:
    if isinstance(value, bool) or value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _text(value: object) -> str:
    return value if isinstance(value, str) else ""
