"""Database module."""

from cinema.db.database import (
    async_session_maker,
    engine,
    get_db,
    init_db,
)
from cinema.db.unit_of_work import UnitOfWork

__all__ = [
    "async_session_maker",
    "engine",
    "get_db",
    "init_db",
    "UnitOfWork",
]
