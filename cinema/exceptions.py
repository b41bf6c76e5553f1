"""Error kinds raised by the catalog write path.

``DomainError`` covers expected conditions a client can act on (missing movie,
oversize image). ``UnexpectedError`` wraps every other failure so callers only
ever see these two kinds.
"""

from fastapi import status

__all__ = [
    "CinemaError",
    "DomainError",
    "UnexpectedError",
]


class CinemaError(Exception):
    """Base error carrying the originating operation and acting user."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        user_id: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.user_id = user_id

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class DomainError(CinemaError):
    """Expected, user-facing failure with an HTTP-style status code."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        *,
        operation: str | None = None,
        user_id: int | None = None,
    ) -> None:
        super().__init__(message, operation=operation, user_id=user_id)
        self.status_code = status_code


class UnexpectedError(CinemaError):
    """Any other failure, raised from the original exception."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
