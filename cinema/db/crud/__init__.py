"""CRUD operations module."""

from cinema.db.crud.actors import (
    create_actor_in_movie,
    delete_actor_in_movie,
    update_actor_in_movie,
)
from cinema.db.crud.images import delete_image, upload_image
from cinema.db.crud.movies import (
    create_movie,
    delete_movie,
    get_movie_for_update,
    update_movie,
)
from cinema.db.crud.queries import (
    get_actors_by_movie,
    get_all_movies,
    get_movie_by_id,
    get_movies_by_name,
    get_movies_with_showings,
)

__all__ = [
    "create_actor_in_movie",
    "create_movie",
    "delete_actor_in_movie",
    "delete_image",
    "delete_movie",
    "get_actors_by_movie",
    "get_all_movies",
    "get_movie_by_id",
    "get_movie_for_update",
    "get_movies_by_name",
    "get_movies_with_showings",
    "update_actor_in_movie",
    "update_movie",
    "upload_image",
]
