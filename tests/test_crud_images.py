"""Tests for movie image attachment."""

import base64

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinema.constants import MAX_IMAGE_SIZE_BYTES
from cinema.db.crud import delete_image, upload_image
from cinema.db.crud.images import split_filename
from cinema.exceptions import DomainError
from cinema.models import Movie

USER_ID = 7


async def image_columns(db: AsyncSession, movie_id: int) -> tuple:
    result = await db.execute(
        select(Movie.image_name, Movie.image_extension, Movie.image_bytes).where(Movie.id == movie_id)
    )
    return tuple(result.one())


class TestSplitFilename:
    """Tests for split_filename."""

    def test_simple(self):
        assert split_filename("poster.png") == ("poster", ".png")

    def test_only_last_suffix_is_extension(self):
        assert split_filename("poster.final.jpeg") == ("poster.final", ".jpeg")

    def test_directories_are_dropped(self):
        assert split_filename("/tmp/uploads/poster.gif") == ("poster", ".gif")

    def test_missing_filename(self):
        assert split_filename(None) == ("", "")


class TestUploadImage:
    """Tests for upload_image."""

    @pytest.mark.asyncio
    async def test_upload_stores_base64(self, db_session: AsyncSession, dune: Movie):
        """Test that name, extension and encoded content are stored together."""
        payload = b"\x89PNG\r\n\x1a\nfake"

        result = await upload_image(db_session, USER_ID, dune.id, payload, "dune_poster.png")

        assert result.succeeded
        assert await image_columns(db_session, dune.id) == (
            "dune_poster",
            ".png",
            base64.b64encode(payload).decode("ascii"),
        )
        rows = await db_session.execute(
            select(Movie.last_modified_by_user_id).where(Movie.id == dune.id)
        )
        assert rows.scalar_one() == USER_ID

    @pytest.mark.asyncio
    async def test_exact_ceiling_is_accepted(self, db_session: AsyncSession, dune: Movie):
        """Test that a payload of exactly 5 MiB is stored."""
        result = await upload_image(
            db_session, USER_ID, dune.id, b"\0" * MAX_IMAGE_SIZE_BYTES, "big.jpg"
        )

        assert result.succeeded
        name, extension, _ = await image_columns(db_session, dune.id)
        assert (name, extension) == ("big", ".jpg")

    @pytest.mark.asyncio
    async def test_oversize_is_rejected_without_writes(self, db_session: AsyncSession, dune: Movie):
        """Test that 5 MiB + 1 byte is rejected and the previous image is kept."""
        movie_id = dune.id
        await upload_image(db_session, USER_ID, movie_id, b"old", "old.png")
        before = await image_columns(db_session, movie_id)

        with pytest.raises(DomainError) as exc_info:
            await upload_image(
                db_session, 8, movie_id, b"\0" * (MAX_IMAGE_SIZE_BYTES + 1), "huge.png"
            )

        assert exc_info.value.status_code == 413
        assert exc_info.value.operation == "upload_image"
        assert not db_session.in_transaction()
        assert await image_columns(db_session, movie_id) == before
        rows = await db_session.execute(
            select(Movie.last_modified_by_user_id).where(Movie.id == movie_id)
        )
        assert rows.scalar_one() == USER_ID

    @pytest.mark.asyncio
    async def test_empty_payload_is_rejected(self, db_session: AsyncSession, dune: Movie):
        """Test that a present but empty payload is a client error."""
        movie_id = dune.id
        with pytest.raises(DomainError) as exc_info:
            await upload_image(db_session, USER_ID, movie_id, b"", "empty.png")

        assert exc_info.value.status_code == 400
        assert await image_columns(db_session, movie_id) == (None, None, None)

    @pytest.mark.asyncio
    async def test_no_payload_only_stamps(self, db_session: AsyncSession, dune: Movie):
        """Test that a call without payload stamps the modification only."""
        result = await upload_image(db_session, 8, dune.id, None)

        assert result.succeeded
        assert await image_columns(db_session, dune.id) == (None, None, None)
        rows = await db_session.execute(
            select(Movie.last_modified_by_user_id).where(Movie.id == dune.id)
        )
        assert rows.scalar_one() == 8

    @pytest.mark.asyncio
    async def test_upload_missing_movie(self, db_session: AsyncSession):
        """Test that uploading to an unknown movie is a 404."""
        with pytest.raises(DomainError) as exc_info:
            await upload_image(db_session, USER_ID, 404, b"data", "x.png")

        assert exc_info.value.status_code == 404


class TestDeleteImage:
    """Tests for delete_image."""

    @pytest.mark.asyncio
    async def test_upload_then_delete_clears_columns(self, db_session: AsyncSession, dune: Movie):
        """Test that delete clears all three image columns."""
        await upload_image(db_session, USER_ID, dune.id, b"image-bytes", "poster.webp")

        result = await delete_image(db_session, 8, dune.id)

        assert result.succeeded
        assert await image_columns(db_session, dune.id) == (None, None, None)

    @pytest.mark.asyncio
    async def test_delete_image_missing_movie(self, db_session: AsyncSession):
        """Test that clearing the image of an unknown movie is a 404."""
        with pytest.raises(DomainError) as exc_info:
            await delete_image(db_session, USER_ID, 404)

        assert exc_info.value.status_code == 404
