"""Event service - handles event management operations.

This service encapsulates the business rules behind the /Event pages:
lookups that 404 on unknown ids, and the identity check on edit.
"""
import logging

from fastapi import HTTPException

from ...forms import EventFormModel
from ...infrastructure.repositories import EventRepository

logger = logging.getLogger(__name__)


class EventService:
    """Service for event CRUD operations.

    Responsibilities:
    - Listing and loading events
    - Creating, updating and deleting events
    - Rejecting edits whose form Id does not match the route id
    """

    def __init__(self, event_repository: EventRepository):
        self.event_repo = event_repository

    def list_events(self) -> list[dict]:
        """Get all events, earliest start first."""
        return self.event_repo.list_all()

    def get_event(self, event_id: int) -> dict:
        """Get event by ID.

        Raises:
            HTTPException: 404 if the event does not exist
        """
        event = self.event_repo.get_by_id(event_id)
        if not event:
            raise HTTPException(status_code=404, detail="Event not found")
        return event

    def get_edit_form(self, event_id: int) -> EventFormModel:
        """Get a form pre-filled with the event's current values."""
        return EventFormModel.from_event(self.get_event(event_id))

    def create_event(self, form: EventFormModel) -> dict:
        """Create a new event from a validated form.

        Returns:
            Created event dict
        """
        event_id = self.event_repo.create(
            name=form.name,
            start=form.start,
            end=form.end,
            place=form.place
        )
        logger.info("Created event %s (%r)", event_id, form.name)
        return self.event_repo.get_by_id(event_id)

    def update_event(self, event_id: int, form: EventFormModel) -> dict:
        """Update an event from a validated form.

        Args:
            event_id: ID taken from the route
            form: Validated form; its Id must equal event_id

        Returns:
            Updated event dict

        Raises:
            HTTPException: 404 on Id mismatch or unknown event
        """
        if form.id != event_id:
            logger.warning("Rejected edit of event %s: form Id is %s", event_id, form.id)
            raise HTTPException(status_code=404, detail="Event not found")

        self.get_event(event_id)

        self.event_repo.update(
            event_id,
            name=form.name,
            start=form.start,
            end=form.end,
            place=form.place
        )
        logger.info("Updated event %s", event_id)
        return self.event_repo.get_by_id(event_id)

    def delete_event(self, event_id: int) -> None:
        """Delete an event.

        Raises:
            HTTPException: 404 if the event does not exist
        """
        if not self.event_repo.delete(event_id):
            raise HTTPException(status_code=404, detail="Event not found")
        logger.info("Deleted event %s", event_id)
