"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from cinema.db.database import get_db
from cinema.main import app
from cinema.models import Base, Classification, Genre, Movie

# Test database URL (uses SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh in-memory database and a session bound to it."""
    test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)
    test_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with test_session_maker() as session:
        yield session

    await test_engine.dispose()


@pytest_asyncio.fixture
async def catalogs(db_session: AsyncSession) -> tuple[Classification, Genre]:
    """Seed one classification and one genre."""
    classification = Classification(name="PG-13")
    genre = Genre(name="Science Fiction")
    db_session.add_all([classification, genre])
    await db_session.commit()
    return classification, genre


@pytest_asyncio.fixture
async def dune(db_session: AsyncSession) -> Movie:
    """Create a committed movie row with no cast."""
    movie = Movie(
        name="Dune",
        director_name="Denis Villeneuve",
        created_by_user_id=7,
        is_active=True,
    )
    db_session.add(movie)
    await db_session.commit()
    return movie


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client without an acting user."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def user_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client acting as user 7."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-User-Id": "7"},
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
