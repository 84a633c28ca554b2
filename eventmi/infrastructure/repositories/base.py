"""Repository base classes.

Both flavours take an open connection (sqlite3 or aiosqlite) and hand back
rows as plain dicts, so callers never see driver row types. Writes commit
immediately; the repositories do not manage transactions across calls.
"""
from typing import Protocol
import sqlite3

import aiosqlite


def row_to_dict(row) -> dict | None:
    """sqlite3.Row / aiosqlite.Row -> dict, passing None through."""
    return dict(row) if row is not None else None


class ConnectionProtocol(Protocol):
    """What Repository needs from a sqlite3-style connection."""

    def execute(self, sql: str, parameters: tuple = ...) -> sqlite3.Cursor: ...
    def commit(self) -> None: ...


class Repository:
    """Base class for sqlite3 repositories.

    Example:
        class EventRepository(Repository):
            def get_by_id(self, event_id: int) -> dict | None:
                return self._fetchone("SELECT * FROM events WHERE id = ?", (event_id,))
    """

    def __init__(self, connection: ConnectionProtocol):
        self._conn = connection

    def _execute(self, sql: str, parameters: tuple = ()) -> sqlite3.Cursor:
        """Run one parameterised statement."""
        return self._conn.execute(sql, parameters)

    def _write(self, sql: str, parameters: tuple = ()) -> sqlite3.Cursor:
        """Run a write statement and commit it.

        Returns the cursor so callers can read lastrowid / rowcount.
        """
        cursor = self._execute(sql, parameters)
        self._conn.commit()
        return cursor

    def _fetchone(self, sql: str, parameters: tuple = ()) -> dict | None:
        return row_to_dict(self._execute(sql, parameters).fetchone())

    def _fetchall(self, sql: str, parameters: tuple = ()) -> list[dict]:
        return [dict(row) for row in self._execute(sql, parameters).fetchall()]


class AsyncConnectionProtocol(Protocol):
    """What AsyncRepository needs from an aiosqlite-style connection."""

    async def execute(self, sql: str, parameters: tuple = ...) -> aiosqlite.Cursor: ...
    async def commit(self) -> None: ...


class AsyncRepository:
    """Base class for aiosqlite repositories; same helpers as Repository, awaited."""

    def __init__(self, connection: AsyncConnectionProtocol):
        self._conn = connection

    async def _execute(self, sql: str, parameters: tuple = ()) -> aiosqlite.Cursor:
        return await self._conn.execute(sql, parameters)

    async def _write(self, sql: str, parameters: tuple = ()) -> aiosqlite.Cursor:
        cursor = await self._execute(sql, parameters)
        await self._conn.commit()
        return cursor

    async def _fetchone(self, sql: str, parameters: tuple = ()) -> dict | None:
        cursor = await self._execute(sql, parameters)
        return row_to_dict(await cursor.fetchone())

    async def _fetchall(self, sql: str, parameters: tuple = ()) -> list[dict]:
        cursor = await self._execute(sql, parameters)
        return [dict(row) for row in await cursor.fetchall()]
