# Repository Pattern Implementation
"""
Repositories abstract database operations.
Each entity has its own repository; every repository has a sync (sqlite3)
and an async (aiosqlite) flavour.
"""
from .base import Repository, AsyncRepository, ConnectionProtocol
from .event_repository import EventRepository, AsyncEventRepository

__all__ = [
    "Repository",
    "AsyncRepository",
    "ConnectionProtocol",
    "EventRepository",
    "AsyncEventRepository",
]
