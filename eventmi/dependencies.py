"""Shared FastAPI dependencies."""
import sqlite3
from typing import Generator

from fastapi import Depends

from .application.services import EventService
from .database import create_connection
from .infrastructure.repositories import EventRepository


def get_connection() -> Generator[sqlite3.Connection, None, None]:
    """Open a connection for the duration of one request."""
    db = create_connection()
    try:
        yield db
    finally:
        db.close()


def get_event_service(db: sqlite3.Connection = Depends(get_connection)) -> EventService:
    """Create EventService with repositories."""
    return EventService(event_repository=EventRepository(db))
