"""Read-only queries over active catalog records."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinema.models.showing import MovieByScreen
from cinema.models.views import ActorsInMoviesView, MoviesView


def _active_movies():
    """Active movies, newest first (id breaks timestamp ties)."""
    return (
        select(MoviesView)
        .where(MoviesView.is_active.is_(True))
        .order_by(MoviesView.created_at.desc(), MoviesView.movie_id.desc())
        .execution_options(populate_existing=True)
    )


async def get_all_movies(db: AsyncSession) -> Sequence[MoviesView]:
    """Get every active movie."""
    result = await db.execute(_active_movies())
    return result.scalars().all()


async def get_movies_with_showings(db: AsyncSession) -> Sequence[MoviesView]:
    """Get active movies scheduled on at least one screen.

    The semi-join returns each movie once however many showings it has.
    """
    scheduled = select(MovieByScreen.movie_id).where(MovieByScreen.is_active.is_(True))
    result = await db.execute(_active_movies().where(MoviesView.movie_id.in_(scheduled)))
    return result.scalars().all()


async def get_movies_by_name(db: AsyncSession, name: str) -> Sequence[MoviesView]:
    """Get active movies whose name contains ``name``.

    Case sensitivity follows the database collation.
    """
    result = await db.execute(
        _active_movies().where(MoviesView.movie_name.contains(name, autoescape=True))
    )
    return result.scalars().all()


async def get_movie_by_id(db: AsyncSession, movie_id: int) -> MoviesView | None:
    """Get a single movie by ID, active or not."""
    result = await db.execute(
        select(MoviesView)
        .where(MoviesView.movie_id == movie_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_actors_by_movie(db: AsyncSession, movie_id: int) -> Sequence[ActorsInMoviesView]:
    """Get the active cast entries of a movie, newest first."""
    result = await db.execute(
        select(ActorsInMoviesView)
        .where(
            ActorsInMoviesView.is_active.is_(True),
            ActorsInMoviesView.movie_id == movie_id,
        )
        .order_by(ActorsInMoviesView.created_at.desc(), ActorsInMoviesView.actor_in_movie_id.desc())
        .execution_options(populate_existing=True)
    )
    return result.scalars().all()
