"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os
from datetime import datetime, timezone

# Keep test runs off the real DB and out of the log directory
os.environ["NOTEFUL_SKIP_LIFESPAN_DB"] = "1"
os.environ.setdefault("LOG_DIR", "")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from noteful.config import Settings, get_settings
from noteful.core.models import BaseModel, Folder, Note
from noteful.database import get_db_session
from noteful.main import app

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_API_TOKEN = "test-api-token"


def make_folders():
    return [
        {"id": 1, "name": "Important"},
        {"id": 2, "name": "Super"},
        {"id": 3, "name": "ToDo"},
        {"id": 4, "name": "Work"},
    ]


def make_notes():
    modified = datetime(2018, 8, 15, 17, 0, 0, tzinfo=timezone.utc)
    return [
        {
            "id": 1,
            "name": "Dogs",
            "modified": modified,
            "folder_id": 1,
            "content": "This is a test note. Note number one.",
        },
        {
            "id": 2,
            "name": "Cats",
            "modified": modified,
            "folder_id": 2,
            "content": "This is a test note. Note number two.",
        },
        {
            "id": 3,
            "name": "Pigs",
            "modified": modified,
            "folder_id": 3,
            "content": "This is a test note. Note number three.",
        },
    ]


def as_json(note: dict) -> dict:
    """What the API renders for a seeded note."""
    rendered = dict(note)
    rendered["modified"] = "2018-08-15T17:00:00.000Z"
    return rendered


@pytest.fixture
def test_settings():
    """Override settings for testing using SQLite in-memory DB."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        api_token=TEST_API_TOKEN,
        debug=True,
        log_dir=None,
    )


@pytest.fixture
async def test_engine(test_settings):
    """Fresh SQLite in-memory engine with the schema created."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_factory):
    """Session for seeding and inspecting the store directly."""
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(session_factory, test_settings):
    """App with the DB session and settings dependencies overridden."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Create async test client."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_API_TOKEN}"}


@pytest.fixture
async def seeded_folders(test_session):
    folders = make_folders()
    test_session.add_all([Folder(**data) for data in folders])
    await test_session.commit()
    return folders


@pytest.fixture
async def seeded_notes(test_session):
    notes = make_notes()
    test_session.add_all([Note(**data) for data in notes])
    await test_session.commit()
    return [as_json(note) for note in notes]
