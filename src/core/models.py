"""
Boundary layer data model(s).

A game record is an open schema: apart from the handful of fields the service reads or stamps, every key supplied by a client is
kept verbatim. Records therefore travel between the API, Service and DB layers as plain dictionaries, and a collection is an
ordered list of them (insertion order is the persisted order).
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

# Type aliases to make signatures easier to read
GameId = str
GameRecord = dict[str, Any]
Collection = list[GameRecord]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def timestamp(moment: datetime | None = None) -> str:
    """ISO 8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    moment = moment or utc_now()
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class GamePage:
    """One page of (filtered) games, together with the numbers needed to navigate the other pages."""

    games: Collection
    page: int
    limit: int
    total: int
    total_pages: int
