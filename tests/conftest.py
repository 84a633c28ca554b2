"""Test configuration and fixtures for Eventmi.

This module provides isolated test environments:
- Temporary database (SQLite) per test
- In-process HTTP clients (sync TestClient, async ASGI transport)
- Sync and async repositories reading the same database file
"""
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import AsyncGenerator, Dict, Generator

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Ensure eventmi is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test environment BEFORE importing eventmi modules
os.environ["EVENTMI_BASE_URL"] = ""
os.environ.setdefault("EVENTMI_LOG_LEVEL", "WARNING")


@pytest.fixture(scope="function")
def isolated_environment(tmp_path: Path) -> Dict:
    """Create completely isolated environment for a single test.

    Returns:
        Dict with paths: db_path, base_dir
    """
    return {
        "db_path": tmp_path / "test.db",
        "base_dir": tmp_path,
    }


@pytest.fixture(scope="function")
def patched_config(isolated_environment: Dict):
    """Monkey-patch app configuration to use the isolated database."""
    import eventmi.config as config

    original_db_path = config.DATABASE_PATH
    config.DATABASE_PATH = isolated_environment["db_path"]

    yield isolated_environment

    config.DATABASE_PATH = original_db_path


@pytest.fixture(scope="function")
def fresh_database(patched_config: Dict):
    """Initialize fresh database with schema for each test."""
    from eventmi.database import init_db, close_db

    # Reset any existing thread-local connection
    close_db()

    init_db()

    yield patched_config["db_path"]

    close_db()


@pytest.fixture(scope="function")
def client(fresh_database: Path) -> Generator[TestClient, None, None]:
    """Create test client with fresh isolated environment.

    Usage:
        def test_something(client):
            response = client.get("/Event/All")
            assert response.status_code == 200
    """
    from eventmi.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def event_client(client: TestClient):
    """Form-encoded /Event client over the in-process TestClient."""
    from eventmi.client import EventmiClient

    return EventmiClient(client)


@pytest_asyncio.fixture
async def async_event_client(fresh_database: Path) -> AsyncGenerator:
    """Async /Event client talking to the app through an ASGI transport."""
    from eventmi.client import AsyncEventmiClient
    from eventmi.main import app

    transport = httpx.ASGITransport(app=app)
    async with AsyncEventmiClient(
        httpx.AsyncClient(transport=transport, base_url="http://testserver")
    ) as async_client:
        yield async_client


@pytest.fixture(scope="function")
def db_connection(fresh_database: Path):
    """Direct sqlite3 connection to the test database."""
    from eventmi.database import create_connection

    conn = create_connection()
    yield conn
    conn.close()


@pytest.fixture(scope="function")
def event_repo(db_connection):
    """EventRepository over the test database, for direct read-back."""
    from eventmi.infrastructure.repositories import EventRepository

    return EventRepository(db_connection)


@pytest_asyncio.fixture
async def async_event_repo(fresh_database: Path) -> AsyncGenerator:
    """AsyncEventRepository over a pooled aiosqlite connection."""
    from eventmi.infrastructure.database import get_async_db, release_async_db, close_async_db
    from eventmi.infrastructure.repositories import AsyncEventRepository

    conn = await get_async_db(fresh_database)
    try:
        yield AsyncEventRepository(conn)
    finally:
        await release_async_db(conn)
        await close_async_db()


@pytest.fixture(scope="function")
def new_event_form():
    """A valid form for a brand-new event."""
    from eventmi.forms import EventFormModel

    return EventFormModel(
        name="New Event",
        start=datetime(2024, 3, 20, 9, 10),
        end=datetime(2024, 3, 21, 9, 10),
        place="Plovdiv"
    )


@pytest.fixture(scope="function")
def sample_event(event_repo) -> Dict:
    """Insert one event directly and return its row."""
    event_id = event_repo.create(
        "Sample Event",
        datetime(2024, 5, 10, 18, 0),
        datetime(2024, 5, 10, 22, 30),
        "Sofia"
    )
    return event_repo.get_by_id(event_id)


@pytest.fixture(scope="function")
def second_event(event_repo) -> Dict:
    """A second stored event, used for identity-mismatch checks."""
    event_id = event_repo.create(
        "Second Event",
        datetime(2024, 7, 1, 10, 0),
        datetime(2024, 7, 1, 12, 0),
        "Varna"
    )
    return event_repo.get_by_id(event_id)
