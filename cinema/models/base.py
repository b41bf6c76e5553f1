"""Declarative base and shared column mixins."""

from datetime import UTC, datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Current time used for every audit stamp."""
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Declarative base for all models."""


class AuditMixin:
    """Soft-delete flag plus creation/modification stamps.

    Records are never physically removed: ``is_active`` flips to False instead.
    The modification stamp stays NULL until the first edit.
    """

    is_active: Mapped[bool] = mapped_column(default=True, index=True)
    created_by_user_id: Mapped[int] = mapped_column(nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    last_modified_by_user_id: Mapped[int | None] = mapped_column(nullable=True)
    last_modified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    def stamp_modification(self, user_id: int) -> None:
        """Record who touched the row and when."""
        self.last_modified_by_user_id = user_id
        self.last_modified_at = utcnow()
