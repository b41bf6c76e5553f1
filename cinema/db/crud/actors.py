"""Cast entry synchronization for a movie.

``create_actor_in_movie`` and ``update_actor_in_movie`` are sub-steps of the
movie write path: they never commit and report problems as warnings on the
returned envelope so the caller can roll the whole movie back.
"""

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from cinema.constants import ACTOR_NAME_MAX_LENGTH, MSG_ACTOR_NOT_FOUND
from cinema.db.unit_of_work import UnitOfWork
from cinema.models.base import utcnow
from cinema.models.movie import ActorInMovie
from cinema.models.schemas import (
    ActorInMovieDetail,
    ActorInMovieWrite,
    ItemResponse,
    ResponseEnvelope,
)
from cinema.utils.logging import get_logger

logger = get_logger(__name__)


def _validate_entry(entry: ActorInMovieWrite) -> list[str]:
    """Return the problems with a cast entry's names, if any."""
    warnings = []
    for label, value in (("first name", entry.first_name), ("last name", entry.last_name)):
        stripped = value.strip()
        if not stripped:
            warnings.append(f"Actor {label} is required.")
        elif len(stripped) > ACTOR_NAME_MAX_LENGTH:
            warnings.append(
                f"Actor {label} '{stripped[:20]}...' exceeds {ACTOR_NAME_MAX_LENGTH} characters."
            )
    return warnings


async def create_actor_in_movie(
    db: AsyncSession,
    user_id: int,
    movie_id: int,
    entry: ActorInMovieWrite,
) -> ItemResponse[ActorInMovieDetail]:
    """Insert one cast entry for ``movie_id`` and resolve its generated id."""
    response = ItemResponse[ActorInMovieDetail]()

    warnings = _validate_entry(entry)
    if warnings:
        response.warnings.extend(warnings)
        return response

    actor = ActorInMovie(
        first_name=entry.first_name.strip(),
        last_name=entry.last_name.strip(),
        movie_id=movie_id,
        created_by_user_id=user_id,
        created_at=utcnow(),
        is_active=True,
    )
    db.add(actor)
    await db.flush()

    response.single_data = ActorInMovieDetail(
        id=actor.id,
        movie_id=movie_id,
        first_name=actor.first_name,
        last_name=actor.last_name,
    )
    return response


async def update_actor_in_movie(
    db: AsyncSession,
    user_id: int,
    movie_id: int,
    entry: ActorInMovieWrite,
) -> ItemResponse[ActorInMovieDetail]:
    """Patch a cast entry's names in place, without loading it first.

    The update is scoped by entry id, movie id and the active flag. Zero matched
    rows means the entry does not belong to this movie or was soft-deleted, and
    is reported as a warning.
    """
    response = ItemResponse[ActorInMovieDetail]()

    warnings = _validate_entry(entry)
    if warnings:
        response.warnings.extend(warnings)
        return response

    first_name = entry.first_name.strip()
    last_name = entry.last_name.strip()
    result = await db.execute(
        update(ActorInMovie)
        .where(
            ActorInMovie.id == entry.id,
            ActorInMovie.movie_id == movie_id,
            ActorInMovie.is_active.is_(True),
        )
        .values(
            first_name=first_name,
            last_name=last_name,
            last_modified_by_user_id=user_id,
            last_modified_at=utcnow(),
        )
    )
    if result.rowcount == 0:
        response.warnings.append(MSG_ACTOR_NOT_FOUND.format(actor_id=entry.id, movie_id=movie_id))
        return response

    response.single_data = ActorInMovieDetail(
        id=entry.id,
        movie_id=movie_id,
        first_name=first_name,
        last_name=last_name,
    )
    return response


async def delete_actor_in_movie(
    db: AsyncSession,
    user_id: int,
    movie_id: int,
    actor_id: int,
) -> ResponseEnvelope:
    """Soft-delete a cast entry. Idempotent; a missing entry is a no-op."""
    async with UnitOfWork(db, "delete_actor_in_movie", user_id):
        result = await db.execute(
            update(ActorInMovie)
            .where(ActorInMovie.id == actor_id, ActorInMovie.movie_id == movie_id)
            .values(
                is_active=False,
                last_modified_by_user_id=user_id,
                last_modified_at=utcnow(),
            )
        )

    if result.rowcount == 0:
        logger.debug(f"Soft-delete matched no cast entry {actor_id} for movie {movie_id}")
    else:
        logger.info(f"Cast entry {actor_id} of movie {movie_id} deactivated by user {user_id}")
    return ResponseEnvelope()
