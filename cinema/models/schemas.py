"""Pydantic schemas for API validation and serialization."""

from datetime import date, datetime, time
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, computed_field

from cinema.constants import DIRECTOR_NAME_MAX_LENGTH, MOVIE_NAME_MAX_LENGTH

T = TypeVar("T")


# Result envelopes
class ResponseEnvelope(BaseModel):
    """Acknowledgment envelope shared by every operation.

    An envelope is successful as long as no warning has been recorded.
    """

    warnings: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def succeeded(self) -> bool:
        return not self.warnings


class ItemResponse(ResponseEnvelope, Generic[T]):
    """Single-item envelope."""

    single_data: T | None = None


class ListResponse(ResponseEnvelope, Generic[T]):
    """List envelope."""

    data_list: list[T] = Field(default_factory=list)


# Actor schemas
class ActorInMovieBase(BaseModel):
    """Base cast entry schema.

    Names are checked by the synchronizer so a bad entry is reported as a
    warning on the parent result rather than rejected up front.
    """

    first_name: str
    last_name: str


class ActorInMovieWrite(ActorInMovieBase):
    """Cast entry as submitted with a movie; ``id`` absent or 0 means new."""

    id: int | None = None

    @property
    def is_new(self) -> bool:
        return not self.id


class ActorInMovieDetail(ActorInMovieBase):
    """Cast entry after synchronization, with generated ids resolved."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    movie_id: int


class ActorInMovieViewRead(BaseModel):
    """Row of the actors-in-movies view."""

    model_config = ConfigDict(from_attributes=True)

    actor_in_movie_id: int
    first_name: str
    last_name: str
    movie_id: int
    movie_name: str
    is_active: bool
    created_by_user_id: int
    created_at: datetime
    last_modified_by_user_id: int | None = None
    last_modified_at: datetime | None = None


# Movie schemas
class MovieBase(BaseModel):
    """Mutable movie fields (image excluded)."""

    name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=MOVIE_NAME_MAX_LENGTH)
    ]
    classification_id: int | None = None
    genre_id: int | None = None
    director_name: str | None = Field(default=None, max_length=DIRECTOR_NAME_MAX_LENGTH)
    release_date: date | None = None
    release_hour: time | None = None
    synopsis: str | None = None


class MovieCreate(MovieBase):
    """Movie creation schema."""

    actors: list[ActorInMovieWrite] = Field(default_factory=list)


class MovieUpdate(MovieBase):
    """Movie update schema."""

    actors: list[ActorInMovieWrite] = Field(default_factory=list)


class MovieDetail(MovieBase):
    """Movie as resolved by a create/update, with every generated id."""

    id: int
    actors: list[ActorInMovieDetail] = Field(default_factory=list)


class MovieViewRead(BaseModel):
    """Row of the movies view."""

    model_config = ConfigDict(from_attributes=True)

    movie_id: int
    movie_name: str
    classification_id: int | None = None
    classification_name: str | None = None
    genre_id: int | None = None
    genre_name: str | None = None
    director_name: str | None = None
    release_date: date | None = None
    release_hour: time | None = None
    synopsis: str | None = None
    image_name: str | None = None
    image_extension: str | None = None
    image_bytes: str | None = None
    is_active: bool
    created_by_user_id: int
    created_at: datetime
    last_modified_by_user_id: int | None = None
    last_modified_at: datetime | None = None
