"""
Attendee endpoints.

Registration for an event and attendee listings.  The paths mirror the
public API: ``/attendees`` for registration and per-event listing and
``/all-attendees`` for the full list.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from event_registry_api.app.core.db import Database, get_db
from event_registry_api.app.core.security import get_current_user
from event_registry_api.app.schemas.attendee import AttendeeRead
from event_registry_api.app.services.attendee_service import AttendeeService


router = APIRouter()


@router.post("/attendees", response_model=AttendeeRead)
async def register_attendee(
    payload: Dict[str, Any] = Body(...),
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
) -> AttendeeRead:
    """Register an attendee for an event.

    Fails with 400 if the same email is already registered for the
    event and with 404 if the event does not exist.
    """
    return await AttendeeService.register(db, payload, current_user)


@router.get("/all-attendees", response_model=List[AttendeeRead])
async def list_all_attendees(
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
) -> List[AttendeeRead]:
    return await AttendeeService.list_attendees(db)


@router.get("/attendees", response_model=List[AttendeeRead])
async def list_event_attendees(
    event_id: Optional[int] = Query(None, alias="eventId"),
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
) -> List[AttendeeRead]:
    """List the attendees of ``eventId``.

    Without ``eventId`` every attendee is returned.
    """
    if event_id is None:
        return await AttendeeService.list_attendees(db)
    return await AttendeeService.list_by_event(db, event_id)
