"""Event form binding and validation.

Form fields use their wire names (Id, Name, Start, End, Place); dates travel
as ``MM/dd/yyyy hh:mm tt`` strings.
"""
from datetime import datetime
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from . import config


def parse_form_datetime(value: str) -> datetime:
    """Parse a date posted by a form.

    Tries the wire format first, then HTML datetime-local, then ISO 8601.
    Event times are local wall-clock times; ISO input with a UTC offset is
    refused.

    Raises:
        ValueError: if no format matches, or the value carries an offset
    """
    text = value.strip()
    for fmt in config.ACCEPTED_DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid date, expected MM/DD/YYYY hh:mm AM/PM") from None
    if parsed.tzinfo is not None:
        raise ValueError(f"'{value}' has a UTC offset, enter the local time without one")
    return parsed


def format_form_datetime(value: datetime | None) -> str:
    """Render a datetime in the wire format (empty string for None)."""
    if value is None:
        return ""
    return value.strftime(config.FORM_DATETIME_FORMAT)


def parse_form_id(value: Any) -> int | None:
    """Parse the posted Id field; absent or malformed values give None."""
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class EventFormModel(BaseModel):
    """Add/Edit form for an event."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    id: Optional[int] = Field(None, alias="Id")
    name: str = Field(
        ..., alias="Name",
        min_length=config.NAME_MIN_LENGTH, max_length=config.NAME_MAX_LENGTH
    )
    start: datetime = Field(..., alias="Start")
    end: datetime = Field(..., alias="End")
    place: str = Field(
        ..., alias="Place",
        min_length=config.PLACE_MIN_LENGTH, max_length=config.PLACE_MAX_LENGTH
    )

    @field_validator("id", mode="before")
    @classmethod
    def blank_id_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("start", "end", mode="before")
    @classmethod
    def parse_dates(cls, value):
        if isinstance(value, str):
            if not value.strip():
                raise ValueError("Field required")
            return parse_form_datetime(value)
        if isinstance(value, datetime) and value.tzinfo is not None:
            raise ValueError("Times must be local, without a UTC offset")
        return value

    @model_validator(mode="after")
    def end_not_before_start(self):
        if self.end < self.start:
            raise ValueError("End must not be before Start")
        return self

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> "EventFormModel":
        """Validate posted form data.

        Raises:
            ValidationError: on missing or invalid fields
        """
        return cls.model_validate(dict(data))

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "EventFormModel":
        """Build a form pre-filled from a repository row.

        Stored rows are trusted as-is, so rows that predate the current
        limits can still be opened for editing.
        """
        return cls.model_construct(
            id=event["id"],
            name=event["name"],
            start=event["start_date"],
            end=event["end_date"],
            place=event["place"]
        )

    def to_form_data(self) -> dict[str, str]:
        """Render the wire payload. Absent Id is left out."""
        data = {
            "Id": str(self.id) if self.id is not None else None,
            "Name": self.name,
            "Start": format_form_datetime(self.start),
            "End": format_form_datetime(self.end),
            "Place": self.place,
        }
        return {key: value for key, value in data.items() if value is not None}


_FIELD_WIRE_NAMES = {
    "id": "Id", "name": "Name", "start": "Start", "end": "End", "place": "Place"
}


def form_errors(exc: ValidationError) -> dict[str, str]:
    """Map validation errors to {wire field name: message}.

    Model-level errors are keyed by the empty string. Only the first message
    per field is kept.
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else ""
        field = _FIELD_WIRE_NAMES.get(field, field)
        message = error.get("msg", "Invalid value")
        # pydantic prefixes messages raised from validators
        message = message.removeprefix("Value error, ")
        errors.setdefault(field, message)
    return errors
