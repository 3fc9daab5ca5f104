"""
Pydantic models for attendee registrations.
"""

from pydantic import BaseModel, Field


class AttendeeBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Ada Lovelace"])
    email: str = Field(..., min_length=1, examples=["ada@example.com"])
    phone: str = Field(..., min_length=1, examples=["+44 20 7946 0000"])
    event_id: int = Field(..., alias="eventId", examples=[1])

    model_config = {
        "populate_by_name": True,
    }


class AttendeeCreate(AttendeeBase):
    """Schema for registering an attendee for an event."""
    pass


class AttendeeRead(AttendeeBase):
    id: int

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
