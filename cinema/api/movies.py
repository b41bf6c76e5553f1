"""Movie API endpoints."""

from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from cinema.auth import get_acting_user_id
from cinema.constants import MAX_IMAGE_SIZE_BYTES
from cinema.db import get_db
from cinema.db.crud import (
    create_movie,
    delete_actor_in_movie,
    delete_image,
    delete_movie,
    get_actors_by_movie,
    get_all_movies,
    get_movie_by_id,
    get_movies_by_name,
    get_movies_with_showings,
    update_movie,
    upload_image,
)
from cinema.models import MoviesView
from cinema.models.schemas import (
    ActorInMovieViewRead,
    ItemResponse,
    ListResponse,
    MovieCreate,
    MovieDetail,
    MovieUpdate,
    MovieViewRead,
    ResponseEnvelope,
)

router = APIRouter()


def _movie_list(movies: Sequence[MoviesView]) -> ListResponse[MovieViewRead]:
    return ListResponse[MovieViewRead](
        data_list=[MovieViewRead.model_validate(movie) for movie in movies]
    )


@router.get("", response_model=ListResponse[MovieViewRead])
async def list_movies(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ListResponse[MovieViewRead]:
    """List all active movies, newest first."""
    return _movie_list(await get_all_movies(db))


@router.get("/assigned", response_model=ListResponse[MovieViewRead])
async def list_movies_with_showings(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ListResponse[MovieViewRead]:
    """List active movies that have at least one active showing."""
    return _movie_list(await get_movies_with_showings(db))


@router.get("/search", response_model=ListResponse[MovieViewRead])
async def search_movies(
    name: Annotated[str, Query(min_length=1)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ListResponse[MovieViewRead]:
    """Search active movies by name substring."""
    return _movie_list(await get_movies_by_name(db, name))


@router.post("", response_model=ItemResponse[MovieDetail], status_code=201)
async def create_movie_endpoint(
    data: MovieCreate,
    response: Response,
    user_id: Annotated[int, Depends(get_acting_user_id)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemResponse[MovieDetail]:
    """Create a movie and its cast entries in one transaction."""
    result = await create_movie(db=db, user_id=user_id, data=data)
    if not result.succeeded:
        response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    return result


@router.get("/{movie_id}", response_model=ItemResponse[MovieViewRead])
async def get_movie_endpoint(
    movie_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemResponse[MovieViewRead]:
    """Get a single movie by ID; ``single_data`` is null when it does not exist."""
    movie = await get_movie_by_id(db, movie_id)
    return ItemResponse[MovieViewRead](
        single_data=MovieViewRead.model_validate(movie) if movie else None
    )


@router.put("/{movie_id}", response_model=ItemResponse[MovieDetail])
async def update_movie_endpoint(
    movie_id: int,
    data: MovieUpdate,
    response: Response,
    user_id: Annotated[int, Depends(get_acting_user_id)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemResponse[MovieDetail]:
    """Update a movie and synchronize its cast entries in one transaction."""
    result = await update_movie(db=db, user_id=user_id, movie_id=movie_id, data=data)
    if not result.succeeded:
        response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    return result


@router.delete("/{movie_id}", response_model=ResponseEnvelope)
async def delete_movie_endpoint(
    movie_id: int,
    user_id: Annotated[int, Depends(get_acting_user_id)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ResponseEnvelope:
    """Soft-delete a movie."""
    return await delete_movie(db=db, user_id=user_id, movie_id=movie_id)


# Cast endpoints
@router.get("/{movie_id}/actors", response_model=ListResponse[ActorInMovieViewRead])
async def list_movie_actors(
    movie_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ListResponse[ActorInMovieViewRead]:
    """List the active cast entries of a movie."""
    actors = await get_actors_by_movie(db, movie_id)
    return ListResponse[ActorInMovieViewRead](
        data_list=[ActorInMovieViewRead.model_validate(actor) for actor in actors]
    )


@router.delete("/{movie_id}/actors/{actor_id}", response_model=ResponseEnvelope)
async def delete_movie_actor(
    movie_id: int,
    actor_id: int,
    user_id: Annotated[int, Depends(get_acting_user_id)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ResponseEnvelope:
    """Soft-delete one cast entry of a movie."""
    return await delete_actor_in_movie(db=db, user_id=user_id, movie_id=movie_id, actor_id=actor_id)


# Image endpoints
@router.post("/{movie_id}/image", response_model=ResponseEnvelope)
async def upload_movie_image(
    movie_id: int,
    user_id: Annotated[int, Depends(get_acting_user_id)],
    db: Annotated[AsyncSession, Depends(get_db)],
    image: Annotated[UploadFile | None, File()] = None,
) -> ResponseEnvelope:
    """Attach an image (max 5MB) to a movie."""
    content = None
    filename = None
    if image is not None:
        # One byte past the ceiling is enough to reject oversize payloads
        content = await image.read(MAX_IMAGE_SIZE_BYTES + 1)
        filename = image.filename
    return await upload_image(
        db=db,
        user_id=user_id,
        movie_id=movie_id,
        content=content,
        filename=filename,
    )


@router.delete("/{movie_id}/image", response_model=ResponseEnvelope)
async def delete_movie_image(
    movie_id: int,
    user_id: Annotated[int, Depends(get_acting_user_id)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ResponseEnvelope:
    """Remove the image attached to a movie."""
    return await delete_image(db=db, user_id=user_id, movie_id=movie_id)
