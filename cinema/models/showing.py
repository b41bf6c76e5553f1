"""Showings relation, owned by scheduling and read here only."""

from datetime import date, time

from sqlalchemy import Date, ForeignKey, Index, Time
from sqlalchemy.orm import Mapped, mapped_column

from cinema.models.base import AuditMixin, Base


class MovieByScreen(Base, AuditMixin):
    """A movie scheduled on a screen."""

    __tablename__ = "movies_by_screens"

    id: Mapped[int] = mapped_column(primary_key=True)
    movie_id: Mapped[int] = mapped_column(ForeignKey("movies.id"), nullable=False)
    screen_id: Mapped[int] = mapped_column(nullable=False, index=True)
    show_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    show_hour: Mapped[time | None] = mapped_column(Time, nullable=True)

    __table_args__ = (Index("ix_movie_by_screen_movie_active", "movie_id", "is_active"),)

    def __repr__(self) -> str:
        return f"<MovieByScreen(id={self.id}, movie_id={self.movie_id}, screen_id={self.screen_id})>"
