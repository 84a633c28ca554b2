"""Async database connection management.

Provides async database connectivity using aiosqlite.
"""
import asyncio
import sqlite3
from pathlib import Path
from typing import Optional

import aiosqlite

from ... import config
# Importing the sync module registers the datetime adapters and converters
from ... import database  # noqa: F401

# Global connection pool reference
_pool: Optional['AsyncConnectionPool'] = None


class AsyncConnectionPool:
    """Bounded pool of aiosqlite connections to one database file.

    At most ``max_connections`` connections are checked out at a time; a
    caller beyond that waits in acquire() until another caller releases.
    Released connections are kept open for reuse.
    """

    def __init__(self, db_path: Path, max_connections: int = 10):
        self.db_path = db_path
        self.max_connections = max_connections
        self._idle: list[aiosqlite.Connection] = []
        self._slots = asyncio.Semaphore(max_connections)
        self._lock = asyncio.Lock()

    async def acquire(self) -> aiosqlite.Connection:
        """Check out a connection, waiting while the pool is exhausted.

        The slot taken here is given back by release().
        """
        await self._slots.acquire()
        try:
            async with self._lock:
                if self._idle:
                    return self._idle.pop()

            conn = await aiosqlite.connect(
                self.db_path,
                detect_types=sqlite3.PARSE_DECLTYPES
            )
        except BaseException:
            self._slots.release()
            raise
        conn.row_factory = aiosqlite.Row
        return conn

    async def release(self, conn: aiosqlite.Connection) -> None:
        """Return a checked-out connection and free its slot."""
        try:
            async with self._lock:
                self._idle.append(conn)
        finally:
            self._slots.release()

    async def close_all(self) -> None:
        """Close idle connections."""
        async with self._lock:
            for conn in self._idle:
                await conn.close()
            self._idle.clear()


async def get_async_db(db_path: Path | None = None) -> aiosqlite.Connection:
    """Get async database connection.

    The pool is bound to the first path it is created with; call
    close_async_db() before switching databases.

    Args:
        db_path: Database file, defaults to config.DATABASE_PATH

    Returns:
        Async database connection
    """
    global _pool
    if _pool is None:
        _pool = AsyncConnectionPool(db_path or config.DATABASE_PATH)
    return await _pool.acquire()


async def release_async_db(conn: aiosqlite.Connection) -> None:
    """Release async database connection back to pool."""
    global _pool
    if _pool:
        await _pool.release(conn)
    else:
        await conn.close()


async def init_async_db(db_path: Path | None = None) -> None:
    """Initialize database schema using async connection."""
    conn = await get_async_db(db_path)
    try:
        await conn.execute("""
            CREATE TABLE IF NOT EXISTS events (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                start_date TIMESTAMP NOT NULL,
                end_date TIMESTAMP NOT NULL,
                place TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        await conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_events_name ON events(name)
        """)
        await conn.commit()
    finally:
        await release_async_db(conn)


async def close_async_db() -> None:
    """Close all async database connections."""
    global _pool
    if _pool:
        await _pool.close_all()
        _pool = None
