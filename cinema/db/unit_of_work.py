"""Transactional boundary for multi-step write operations."""

from types import TracebackType

from sqlalchemy.ext.asyncio import AsyncSession

from cinema.exceptions import DomainError, UnexpectedError
from cinema.utils.logging import get_logger

logger = get_logger(__name__)


class UnitOfWork:
    """Commit on clean exit, roll back on any early exit.

    Usage:
        async with UnitOfWork(db, "create_movie", user_id) as uow:
            ...
            if failed:
                await uow.rollback()
                return response

    Work done inside the block joins the session's transaction (SQLAlchemy
    autobegins it). On an exception the transaction is rolled back if one is
    open, a ``DomainError`` is re-raised as is and anything else is wrapped in
    ``UnexpectedError``.
    """

    def __init__(self, session: AsyncSession, operation: str, user_id: int | None = None) -> None:
        self.session = session
        self.operation = operation
        self.user_id = user_id
        self._closed = False

    async def __aenter__(self) -> "UnitOfWork":
        self._closed = False
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None:
            if self._closed:
                return False
            try:
                await self.commit()
            except Exception as commit_exc:
                await self.rollback()
                raise self._wrap(commit_exc) from commit_exc
            return False

        await self.rollback()

        if isinstance(exc, DomainError):
            if exc.operation is None:
                exc.operation = self.operation
            if exc.user_id is None:
                exc.user_id = self.user_id
            return False

        if isinstance(exc, Exception):
            raise self._wrap(exc) from exc

        # BaseException (cancellation, KeyboardInterrupt) propagates untouched
        return False

    def _wrap(self, exc: Exception) -> UnexpectedError:
        logger.error(f"{self.operation} rolled back after unexpected error: {exc!r}")
        return UnexpectedError(
            str(exc) or exc.__class__.__name__,
            operation=self.operation,
            user_id=self.user_id,
        )

    async def commit(self) -> None:
        """Commit the current transaction and close the unit."""
        await self.session.commit()
        self._closed = True

    async def rollback(self) -> None:
        """Discard every write made in this unit and close it."""
        if self.session.in_transaction():
            await self.session.rollback()
        self._closed = True
