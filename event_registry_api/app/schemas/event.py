"""
Pydantic models for event data.

These schemas define the structure of event data exchanged via the
API.  ``EventBase`` holds the client-writable fields; ``EventCreate``
is used to validate new events and ``EventRead`` adds the generated
``id`` and the ``attendeesTotal`` counter for responses.  Field names
are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class EventType(str, Enum):
    CONFERENCE = "Conference"
    WORKSHOP = "Workshop"
    MEETUP = "Meetup"


class EventBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Intro to FastAPI"])
    description: Optional[str] = Field(None, examples=["Evening meetup for backend developers"])
    date: datetime = Field(..., examples=["2024-01-01T18:00:00"])
    type: EventType = Field(..., examples=["Meetup"])

    model_config = {
        "populate_by_name": True,
    }


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class EventRead(EventBase):
    """Schema for reading an event from the API."""

    id: int
    attendees_total: int = Field(0, alias="attendeesTotal")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class EventUpdate(BaseModel):
    """Schema for updating an event.

    All fields are optional; only provided fields will be updated.
    ``attendeesTotal`` is maintained by attendee registration and
    cannot be set here.
    """
    name: str | None = Field(None, min_length=1)
    description: str | None = None
    date: datetime | None = None
    type: EventType | None = None


class EventPage(BaseModel):
    """A page of events together with the total number of matches."""

    events: List[EventRead]
    total: int
