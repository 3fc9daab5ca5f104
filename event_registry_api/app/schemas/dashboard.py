from pydantic import BaseModel, Field


class DashboardSummary(BaseModel):
    """Unconditional counts over the events and attendees tables."""

    total_events: int = Field(..., alias="totalEvents")
    total_attendees: int = Field(..., alias="totalAttendees")

    model_config = {
        "populate_by_name": True,
    }


class MessageResponse(BaseModel):
    message: str
