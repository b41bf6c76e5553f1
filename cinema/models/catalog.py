"""Lookup catalogs referenced by movies."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from cinema.constants import LOOKUP_NAME_MAX_LENGTH
from cinema.models.base import Base


class Classification(Base):
    """Audience classification (rating board category)."""

    __tablename__ = "classifications"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(LOOKUP_NAME_MAX_LENGTH), nullable=False)
    is_active: Mapped[bool] = mapped_column(default=True)

    def __repr__(self) -> str:
        return f"<Classification(id={self.id}, name={self.name})>"


class Genre(Base):
    """Movie genre."""

    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(LOOKUP_NAME_MAX_LENGTH), nullable=False)
    is_active: Mapped[bool] = mapped_column(default=True)

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name={self.name})>"
