"""SQLAlchemy models."""

from cinema.models.base import AuditMixin, Base
from cinema.models.catalog import Classification, Genre
from cinema.models.movie import ActorInMovie, Movie
from cinema.models.showing import MovieByScreen
from cinema.models.views import ActorsInMoviesView, MoviesView

__all__ = [
    "Base",
    "AuditMixin",
    "Classification",
    "Genre",
    "Movie",
    "ActorInMovie",
    "MovieByScreen",
    "MoviesView",
    "ActorsInMoviesView",
]
