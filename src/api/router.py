"""HTTP verbs of the games resource, dispatched to the CatalogService."""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request

from src.api.models import (
    CreateGameRequest,
    DeleteGamesRequest,
    DeleteGamesResponse,
    GameListResponse,
    GameResponse,
    ListGamesRequest,
    UpdateGameRequest,
)
from src.core.dependencies import get_catalog_service
from src.core.models import GameRecord
from src.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/games", tags=["games"])


@router.get("", response_model=None)
def get_games(
    request: Request, service: CatalogService = Depends(get_catalog_service)
) -> GameRecord | GameListResponse:
    """A single game when `id` is given, otherwise a filtered page of games."""
    query = ListGamesRequest(**dict(request.query_params))
    if query.id is not None:
        return service.get_game(query.id)
    return service.list_games(query)


@router.post("")
def create_game(
    body: Optional[dict[str, Any]] = Body(None),
    service: CatalogService = Depends(get_catalog_service),
) -> GameResponse:
    return service.create_game(CreateGameRequest(**(body or {})))


@router.put("")
def update_game(
    body: Optional[dict[str, Any]] = Body(None),
    service: CatalogService = Depends(get_catalog_service),
) -> GameResponse:
    return service.update_game(UpdateGameRequest(**(body or {})))


@router.delete("")
def delete_games(
    body: Optional[dict[str, Any]] = Body(None),
    service: CatalogService = Depends(get_catalog_service),
) -> DeleteGamesResponse:
    return service.delete_games(DeleteGamesRequest(**(body or {})))
