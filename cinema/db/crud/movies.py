"""Movie write path: a movie and its cast entries as one atomic unit."""

from fastapi import status
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cinema.constants import MSG_MOVIE_NOT_FOUND
from cinema.db.crud.actors import create_actor_in_movie, update_actor_in_movie
from cinema.db.unit_of_work import UnitOfWork
from cinema.exceptions import DomainError
from cinema.models.base import utcnow
from cinema.models.movie import Movie
from cinema.models.schemas import (
    ActorInMovieDetail,
    ItemResponse,
    MovieBase,
    MovieCreate,
    MovieDetail,
    MovieUpdate,
    ResponseEnvelope,
)
from cinema.utils.logging import LogContext, get_logger

logger = get_logger(__name__)


def _lookup_id(value: int | None) -> int | None:
    """Lookup ids of 0 mean "unset" and are stored as NULL."""
    return value or None


def _apply_fields(movie: Movie, data: MovieBase) -> None:
    """Copy the mutable fields onto the row. Image columns are left alone."""
    movie.name = data.name
    movie.classification_id = _lookup_id(data.classification_id)
    movie.genre_id = _lookup_id(data.genre_id)
    movie.director_name = data.director_name
    movie.release_date = data.release_date
    movie.release_hour = data.release_hour
    movie.synopsis = data.synopsis


def _to_detail(movie: Movie, actors: list[ActorInMovieDetail]) -> MovieDetail:
    return MovieDetail(
        id=movie.id,
        name=movie.name,
        classification_id=movie.classification_id,
        genre_id=movie.genre_id,
        director_name=movie.director_name,
        release_date=movie.release_date,
        release_hour=movie.release_hour,
        synopsis=movie.synopsis,
        actors=actors,
    )


async def get_movie_for_update(db: AsyncSession, movie_id: int) -> Movie:
    """Load a movie row for writing, raising a not-found DomainError if absent."""
    result = await db.execute(
        select(Movie)
        .where(Movie.id == movie_id)
        .execution_options(populate_existing=True)
    )
    movie = result.scalar_one_or_none()
    if movie is None:
        raise DomainError(MSG_MOVIE_NOT_FOUND, status.HTTP_404_NOT_FOUND)
    return movie


async def create_movie(
    db: AsyncSession,
    user_id: int,
    data: MovieCreate,
) -> ItemResponse[MovieDetail]:
    """Create a movie together with its cast entries.

    Every cast entry is created after the movie row so it can reference the
    generated id. The first entry that fails aborts the whole operation: the
    movie and any entries already written are rolled back and the entry's
    warnings are returned on an unsuccessful result.
    """
    response = ItemResponse[MovieDetail]()
    log = LogContext(logger, op="create_movie", user=user_id)

    async with UnitOfWork(db, "create_movie", user_id) as uow:
        movie = Movie(created_by_user_id=user_id, created_at=utcnow(), is_active=True)
        _apply_fields(movie, data)
        db.add(movie)
        await db.flush()
        log = log.bind(movie=movie.id)

        actors: list[ActorInMovieDetail] = []
        for entry in data.actors:
            actor_response = await create_actor_in_movie(db, user_id, movie.id, entry)
            if not actor_response.succeeded:
                await uow.rollback()
                response.warnings.extend(actor_response.warnings)
                log.warning(f"Rolled back new movie: {actor_response.warnings}")
                return response
            actors.append(actor_response.single_data)

        response.single_data = _to_detail(movie, actors)

    log.info(f"Created movie with {len(actors)} cast entries")
    return response


async def update_movie(
    db: AsyncSession,
    user_id: int,
    movie_id: int,
    data: MovieUpdate,
) -> ItemResponse[MovieDetail]:
    """Overwrite a movie's fields and synchronize its cast entries.

    Entries without an id are created, the others are patched in place.
    Raises:
        DomainError: 404 if the movie does not exist.
    """
    response = ItemResponse[MovieDetail]()
    log = LogContext(logger, op="update_movie", user=user_id, movie=movie_id)

    async with UnitOfWork(db, "update_movie", user_id) as uow:
        movie = await get_movie_for_update(db, movie_id)
        _apply_fields(movie, data)
        movie.stamp_modification(user_id)
        await db.flush()

        actors: list[ActorInMovieDetail] = []
        for entry in data.actors:
            if entry.is_new:
                actor_response = await create_actor_in_movie(db, user_id, movie_id, entry)
            else:
                actor_response = await update_actor_in_movie(db, user_id, movie_id, entry)

            if not actor_response.succeeded:
                await uow.rollback()
                response.warnings.extend(actor_response.warnings)
                log.warning(f"Rolled back update: {actor_response.warnings}")
                return response
            actors.append(actor_response.single_data)

        response.single_data = _to_detail(movie, actors)

    log.info(f"Updated movie with {len(actors)} cast entries")
    return response


async def delete_movie(
    db: AsyncSession,
    user_id: int,
    movie_id: int,
) -> ResponseEnvelope:
    """Soft-delete a movie. Idempotent; a missing movie is a no-op.

    Cast entries keep their own active flag.
    """
    async with UnitOfWork(db, "delete_movie", user_id):
        result = await db.execute(
            update(Movie)
            .where(Movie.id == movie_id)
            .values(
                is_active=False,
                last_modified_by_user_id=user_id,
                last_modified_at=utcnow(),
            )
        )

    if result.rowcount == 0:
        logger.debug(f"Soft-delete matched no movie {movie_id}")
    else:
        logger.info(f"Movie {movie_id} deactivated by user {user_id}")
    return ResponseEnvelope()
