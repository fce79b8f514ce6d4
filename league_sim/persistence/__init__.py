"""
Persistence layer for league data.
No business logic and no simulation, only read/write interfaces.
"""
from .db import get_connection, init_db
from .repositories import (
    TeamRepository,
    MatchRepository,
)

__all__ = [
    "get_connection",
    "init_db",
    "TeamRepository",
    "MatchRepository",
]
