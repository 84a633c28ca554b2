"""Event repository - handles all event-related database operations.

Rows come back as dicts with keys: id, name, start_date, end_date, place,
created_at. Dates are datetime objects (see the converters in eventmi.database).
"""
from datetime import datetime

from .base import Repository, AsyncRepository

_SELECT = "SELECT id, name, start_date, end_date, place, created_at FROM events"
_INSERT = "INSERT INTO events (name, start_date, end_date, place) VALUES (?, ?, ?, ?)"


class EventRepository(Repository):
    """Repository for event entity operations.

    Examples:
        >>> repo = EventRepository(db)
        >>> event_id = repo.create("Jazz Night", start, end, "Plovdiv")
        >>> repo.get_by_id(event_id)["name"]
        'Jazz Night'
        >>> repo.delete(event_id)
        True
    """

    def create(self, name: str, start: datetime, end: datetime, place: str) -> int:
        """Insert a new event.

        Returns:
            Server-assigned event ID
        """
        cursor = self._write(_INSERT, (name, start, end, place))
        return cursor.lastrowid

    def get_by_id(self, event_id: int) -> dict | None:
        """Get event by ID."""
        return self._fetchone(f"{_SELECT} WHERE id = ?", (event_id,))

    def get_by_name(self, name: str) -> dict | None:
        """Get the first event (lowest ID) with exactly this name."""
        return self._fetchone(f"{_SELECT} WHERE name = ? ORDER BY id LIMIT 1", (name,))

    def exists_by_name(self, name: str) -> bool:
        """Check whether any event carries this name."""
        row = self._fetchone("SELECT 1 AS found FROM events WHERE name = ? LIMIT 1", (name,))
        return row is not None

    def list_all(self) -> list[dict]:
        """Get all events, earliest start first."""
        return self._fetchall(f"{_SELECT} ORDER BY start_date, id")

    def update(
        self,
        event_id: int,
        name: str,
        start: datetime,
        end: datetime,
        place: str
    ) -> bool:
        """Replace all editable fields of an event.

        Returns:
            True if the event existed and was updated
        """
        cursor = self._write(
            """UPDATE events
               SET name = ?, start_date = ?, end_date = ?, place = ?
               WHERE id = ?""",
            (name, start, end, place, event_id)
        )
        return cursor.rowcount > 0

    def delete(self, event_id: int) -> bool:
        """Delete event.

        Returns:
            True if the event existed and was deleted
        """
        return self._write("DELETE FROM events WHERE id = ?", (event_id,)).rowcount > 0

    def count(self) -> int:
        return self._fetchone("SELECT COUNT(*) AS total FROM events")["total"]


class AsyncEventRepository(AsyncRepository):
    """Async repository for event read-back and fixture setup.

    Mirrors the read side of EventRepository over aiosqlite.
    """

    async def create(self, name: str, start: datetime, end: datetime, place: str) -> int:
        """Insert a new event and return its ID."""
        cursor = await self._write(_INSERT, (name, start, end, place))
        return cursor.lastrowid

    async def get_by_id(self, event_id: int) -> dict | None:
        """Get event by ID."""
        return await self._fetchone(f"{_SELECT} WHERE id = ?", (event_id,))

    async def get_by_name(self, name: str) -> dict | None:
        """Get the first event (lowest ID) with exactly this name."""
        return await self._fetchone(
            f"{_SELECT} WHERE name = ? ORDER BY id LIMIT 1",
            (name,)
        )

    async def exists_by_name(self, name: str) -> bool:
        row = await self._fetchone(
            "SELECT 1 AS found FROM events WHERE name = ? LIMIT 1",
            (name,)
        )
        return row is not None

    async def list_all(self) -> list[dict]:
        """Get all events, earliest start first."""
        return await self._fetchall(f"{_SELECT} ORDER BY start_date, id")

    async def delete(self, event_id: int) -> bool:
        cursor = await self._write("DELETE FROM events WHERE id = ?", (event_id,))
        return cursor.rowcount > 0

    async def count(self) -> int:
        row = await self._fetchone("SELECT COUNT(*) AS total FROM events")
        return row["total"]
