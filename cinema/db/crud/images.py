"""Single image attachment stored on the movie row."""

import base64
from pathlib import PurePath

from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from cinema.constants import MAX_IMAGE_SIZE_BYTES, MSG_IMAGE_EMPTY, MSG_IMAGE_TOO_LARGE
from cinema.db.crud.movies import get_movie_for_update
from cinema.db.unit_of_work import UnitOfWork
from cinema.exceptions import DomainError
from cinema.models.schemas import ResponseEnvelope
from cinema.utils.logging import get_logger

logger = get_logger(__name__)


def split_filename(filename: str | None) -> tuple[str, str]:
    """Split a client filename into base name and extension (with its dot).

    Any directory part sent by the client is dropped.
    """
    path = PurePath(PurePath(filename or "").name)
    return path.stem, path.suffix


async def upload_image(
    db: AsyncSession,
    user_id: int,
    movie_id: int,
    content: bytes | None,
    filename: str | None = None,
) -> ResponseEnvelope:
    """Attach an image to a movie, replacing any previous one.

    ``content=None`` only stamps the modification. An empty payload or one
    larger than ``MAX_IMAGE_SIZE_BYTES`` is rejected before anything is written.

    Raises:
        DomainError: 404 movie not found, 400 empty payload, 413 payload too large.
    """
    async with UnitOfWork(db, "upload_image", user_id):
        movie = await get_movie_for_update(db, movie_id)

        if content is not None:
            if len(content) == 0:
                raise DomainError(MSG_IMAGE_EMPTY, status.HTTP_400_BAD_REQUEST)
            if len(content) > MAX_IMAGE_SIZE_BYTES:
                raise DomainError(MSG_IMAGE_TOO_LARGE, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)

            movie.image_name, movie.image_extension = split_filename(filename)
            movie.image_bytes = base64.b64encode(content).decode("ascii")

        movie.stamp_modification(user_id)
        await db.flush()

    if content is not None:
        logger.info(f"Stored {len(content)} byte image for movie {movie_id} (user {user_id})")
    return ResponseEnvelope()


async def delete_image(
    db: AsyncSession,
    user_id: int,
    movie_id: int,
) -> ResponseEnvelope:
    """Clear the three image columns of a movie.

    Raises:
        DomainError: 404 movie not found.
    """
    async with UnitOfWork(db, "delete_image", user_id):
        movie = await get_movie_for_update(db, movie_id)
        movie.image_name = None
        movie.image_extension = None
        movie.image_bytes = None
        movie.stamp_modification(user_id)
        await db.flush()

    logger.info(f"Cleared image of movie {movie_id} (user {user_id})")
    return ResponseEnvelope()
