"""Read-only denormalized projections used by the query service.

Both classes are mapped against ``SELECT`` subqueries rather than tables, so
``Base.metadata.create_all`` never emits DDL for them and they cannot be
flushed.
"""

from sqlalchemy import select

from cinema.models.base import Base
from cinema.models.catalog import Classification, Genre
from cinema.models.movie import ActorInMovie, Movie

movies_view = (
    select(
        Movie.id.label("movie_id"),
        Movie.name.label("movie_name"),
        Movie.classification_id,
        Classification.name.label("classification_name"),
        Movie.genre_id,
        Genre.name.label("genre_name"),
        Movie.director_name,
        Movie.release_date,
        Movie.release_hour,
        Movie.synopsis,
        Movie.image_name,
        Movie.image_extension,
        Movie.image_bytes,
        Movie.is_active,
        Movie.created_by_user_id,
        Movie.created_at,
        Movie.last_modified_by_user_id,
        Movie.last_modified_at,
    )
    .select_from(Movie)
    .outerjoin(Classification, Movie.classification_id == Classification.id)
    .outerjoin(Genre, Movie.genre_id == Genre.id)
    .subquery("movies_view")
)

actors_in_movies_view = (
    select(
        ActorInMovie.id.label("actor_in_movie_id"),
        ActorInMovie.first_name,
        ActorInMovie.last_name,
        ActorInMovie.movie_id,
        Movie.name.label("movie_name"),
        ActorInMovie.is_active,
        ActorInMovie.created_by_user_id,
        ActorInMovie.created_at,
        ActorInMovie.last_modified_by_user_id,
        ActorInMovie.last_modified_at,
    )
    .select_from(ActorInMovie)
    .join(Movie, ActorInMovie.movie_id == Movie.id)
    .subquery("actors_in_movies_view")
)


class MoviesView(Base):
    """Movie with its classification and genre names."""

    __table__ = movies_view
    __mapper_args__ = {"primary_key": [movies_view.c.movie_id]}

    def __repr__(self) -> str:
        return f"<MoviesView(movie_id={self.movie_id}, movie_name={self.movie_name})>"


class ActorsInMoviesView(Base):
    """Cast entry with its movie name."""

    __table__ = actors_in_movies_view
    __mapper_args__ = {"primary_key": [actors_in_movies_view.c.actor_in_movie_id]}

    def __repr__(self) -> str:
        return f"<ActorsInMoviesView(actor_in_movie_id={self.actor_in_movie_id})>"
