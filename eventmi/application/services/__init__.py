"""Application services - business logic layer."""

from .event_service import EventService

__all__ = [
    "EventService",
]
