"""Movie and cast entry models."""

from datetime import date, time

from sqlalchemy import Date, ForeignKey, Index, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinema.constants import (
    ACTOR_NAME_MAX_LENGTH,
    DIRECTOR_NAME_MAX_LENGTH,
    IMAGE_EXTENSION_MAX_LENGTH,
    IMAGE_NAME_MAX_LENGTH,
    MOVIE_NAME_MAX_LENGTH,
)
from cinema.models.base import AuditMixin, Base


class Movie(Base, AuditMixin):
    """Catalog movie record."""

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(MOVIE_NAME_MAX_LENGTH), nullable=False)
    classification_id: Mapped[int | None] = mapped_column(
        ForeignKey("classifications.id"), nullable=True
    )
    genre_id: Mapped[int | None] = mapped_column(ForeignKey("genres.id"), nullable=True)
    director_name: Mapped[str | None] = mapped_column(
        String(DIRECTOR_NAME_MAX_LENGTH), nullable=True
    )
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    release_hour: Mapped[time | None] = mapped_column(Time, nullable=True)
    synopsis: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Image is stored as one unit: base name, extension (with dot), base64 content
    image_name: Mapped[str | None] = mapped_column(String(IMAGE_NAME_MAX_LENGTH), nullable=True)
    image_extension: Mapped[str | None] = mapped_column(
        String(IMAGE_EXTENSION_MAX_LENGTH), nullable=True
    )
    image_bytes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    # lazy="raise" - cast entries are always queried explicitly
    actors: Mapped[list["ActorInMovie"]] = relationship(
        "ActorInMovie",
        back_populates="movie",
        lazy="raise",
    )

    __table_args__ = (Index("ix_movie_active_created", "is_active", "created_at"),)

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, name={self.name})>"


class ActorInMovie(Base, AuditMixin):
    """Cast entry tied to exactly one movie."""

    __tablename__ = "actors_in_movies"

    id: Mapped[int] = mapped_column(primary_key=True)
    first_name: Mapped[str] = mapped_column(String(ACTOR_NAME_MAX_LENGTH), nullable=False)
    last_name: Mapped[str] = mapped_column(String(ACTOR_NAME_MAX_LENGTH), nullable=False)
    movie_id: Mapped[int] = mapped_column(ForeignKey("movies.id"), nullable=False, index=True)

    movie: Mapped["Movie"] = relationship("Movie", back_populates="actors", lazy="raise")

    def __repr__(self) -> str:
        return f"<ActorInMovie(id={self.id}, movie_id={self.movie_id})>"
