"""Requests and Response models"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.core.exceptions import BadRequestError
from src.core.models import GameId, GameRecord


def _coerce_id(value: Any) -> Any:
    """Clients sometimes send numeric IDs; they are stored as strings. A blank ID counts as no ID at all."""
    if isinstance(value, str) and not value.strip():
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# --- REQUEST MODELS ---
class ListGamesRequest(BaseModel):
    """Query string of a GET request. Values arrive as strings."""

    id: Optional[GameId] = None
    category: Optional[str] = None
    search: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None

    @field_validator("page", "limit", mode="before")
    @classmethod
    def validate_positive_int(cls, value: Any) -> Optional[int]:
        if value is None or value == "":
            return None
        if isinstance(value, bool):
            raise BadRequestError(f"Cannot interpret {value!r} as a page number or page size.")
        try:
            number = int(str(value).strip())
        except ValueError:
            raise BadRequestError(f"Cannot interpret {value!r} as a page number or page size.")
        if number < 1:
            raise BadRequestError(f"Page number and page size must be positive, got {number}.")
        return number

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> Any:
        return _coerce_id(value)


class GameRequest(BaseModel):
    """
    Body of a POST or PUT request: a (partial) game record.

    Only the ID is declared. Every other field is kept verbatim, whatever its name.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[GameId] = None

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> Any:
        return _coerce_id(value)

    def fields(self) -> GameRecord:
        """The supplied fields as a plain record (ID first, when supplied)."""
        record: GameRecord = {} if self.id is None else {"id": self.id}
        record.update(self.model_extra or {})
        return record


class CreateGameRequest(GameRequest):
    pass


class UpdateGameRequest(GameRequest):
    pass


class DeleteGamesRequest(BaseModel):
    """Either a single `id`, or a list of `ids` for a bulk delete."""

    id: Optional[GameId] = None
    ids: Optional[list[GameId]] = None

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> Any:
        return _coerce_id(value)

    @field_validator("ids", mode="before")
    @classmethod
    def validate_ids(cls, value: Any) -> Optional[list[Any]]:
        # Anything but a list does not select the bulk delete.
        if not isinstance(value, list):
            return None
        return [v for v in (_coerce_id(x) for x in value) if v is not None]


# --- RESPONSE MODELS ---
class Pagination(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int = Field(alias="totalPages")


class GameListResponse(BaseModel):
    games: list[GameRecord]
    pagination: Pagination


class GameResponse(BaseModel):
    success: bool = True
    game: GameRecord


class DeleteGamesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    deleted_count: int = Field(alias="deletedCount")


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    status_message: str = Field(alias="statusMessage")
