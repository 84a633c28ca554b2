"""Fixtures for running the controller checks against a deployed Eventmi.

Enabled by environment variables, skipped otherwise:

    EVENTMI_LIVE_URL=https://localhost:7236
    EVENTMI_LIVE_DATABASE=/srv/eventmi/eventmi.db
    EVENTMI_LIVE_VERIFY_TLS=0        # self-signed development certificates

The database file must be the one the server writes to; it is read directly
to verify what the HTTP calls persisted.
"""
import os
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio


@dataclass
class LiveConfig:
    """Where the deployment under test lives."""

    base_url: str = os.getenv("EVENTMI_LIVE_URL", "")
    database: str = os.getenv("EVENTMI_LIVE_DATABASE", "")
    verify_tls: bool = os.getenv("EVENTMI_LIVE_VERIFY_TLS", "1") not in ("0", "false", "no")

    def missing(self) -> list[str]:
        missing = []
        if not self.base_url:
            missing.append("EVENTMI_LIVE_URL")
        if not self.database:
            missing.append("EVENTMI_LIVE_DATABASE")
        elif not Path(self.database).exists():
            missing.append(f"EVENTMI_LIVE_DATABASE ({self.database} does not exist)")
        return missing


def pytest_collection_modifyitems(config, items):
    """Mark everything in this directory as live."""
    live_dir = Path(__file__).parent
    for item in items:
        if live_dir in Path(item.path).parents:
            item.add_marker(pytest.mark.live)


@pytest.fixture(scope="session")
def live_config() -> LiveConfig:
    config = LiveConfig()
    missing = config.missing()
    if missing:
        pytest.skip(f"live Eventmi not configured: {', '.join(missing)}")
    return config


@pytest.fixture
def live_client(live_config: LiveConfig):
    from eventmi.client import EventmiClient

    with EventmiClient.connect(live_config.base_url, verify=live_config.verify_tls) as client:
        yield client


@pytest_asyncio.fixture
async def async_live_client(live_config: LiveConfig) -> AsyncGenerator:
    from eventmi.client import AsyncEventmiClient

    async with AsyncEventmiClient.connect(live_config.base_url, verify=live_config.verify_tls) as client:
        yield client


@pytest.fixture
def live_repo(live_config: LiveConfig):
    """EventRepository over the deployment's database file."""
    from eventmi.infrastructure.repositories import EventRepository

    conn = sqlite3.connect(live_config.database, detect_types=sqlite3.PARSE_DECLTYPES)
    conn.row_factory = sqlite3.Row
    yield EventRepository(conn)
    conn.close()


@pytest_asyncio.fixture
async def async_live_repo(live_config: LiveConfig) -> AsyncGenerator:
    from eventmi.infrastructure.database import get_async_db, release_async_db, close_async_db
    from eventmi.infrastructure.repositories import AsyncEventRepository

    conn = await get_async_db(Path(live_config.database))
    try:
        yield AsyncEventRepository(conn)
    finally:
        await release_async_db(conn)
        await close_async_db()


@pytest.fixture
def existing_event(live_repo) -> dict:
    """Any event already present in the deployment."""
    events = live_repo.list_all()
    if not events:
        pytest.skip("live database has no events; run `manage_events.py seed` against it")
    return events[0]


@pytest.fixture
def created_names(live_repo):
    """Names of events a test creates; removed from the deployment afterwards."""
    names: list[str] = []
    yield names
    for name in names:
        while (event := live_repo.get_by_name(name)) is not None:
            live_repo.delete(event["id"])
