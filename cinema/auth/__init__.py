"""Request identity module."""

from cinema.auth.dependencies import get_acting_user_id

__all__ = [
    "get_acting_user_id",
]
