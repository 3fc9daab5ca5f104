"""
Event endpoints.

CRUD operations for events plus paginated and type-filtered listings.
Every route requires a valid token.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from event_registry_api.app.core.db import Database, get_db
from event_registry_api.app.core.security import get_current_user
from event_registry_api.app.schemas.dashboard import MessageResponse
from event_registry_api.app.schemas.event import EventPage, EventRead
from event_registry_api.app.services.event_service import EventService


router = APIRouter()

# Keeps the OFFSET computed from page and limit inside SQLite's 64-bit
# INTEGER range.
MAX_PAGE = 2**31 - 1
MAX_LIMIT = 2**31 - 1


@router.post("", response_model=EventRead)
async def create_event(
    payload: Dict[str, Any] = Body(...),
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
) -> EventRead:
    """Create a new event.

    The body is validated by the service so that a missing ``name``,
    ``date`` or ``type`` is reported as a validation error with the
    offending fields listed.
    """
    return await EventService.create_event(db, payload, current_user)


@router.get("", response_model=EventPage)
async def list_events(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(2, ge=1, le=MAX_LIMIT),
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
) -> EventPage:
    """Return one page of events and the total number of events."""
    return await EventService.list_events(db, page=page, limit=limit)


@router.get("/all", response_model=List[EventRead])
async def list_all_events(
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
) -> List[EventRead]:
    return await EventService.list_all_events(db)


@router.get("/filter", response_model=EventPage)
async def filter_events(
    event_type: Optional[str] = Query(None, alias="type"),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(2, ge=1, le=MAX_LIMIT),
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
) -> EventPage:
    """Return one page of events of the given ``type``.

    Without ``type`` this behaves like ``GET /api/events``.  ``total``
    counts only the matching events.
    """
    return await EventService.list_events(db, page=page, limit=limit, event_type=event_type)


@router.put("/{event_id}", response_model=EventRead)
async def update_event(
    event_id: int,
    payload: Dict[str, Any] = Body(...),
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
) -> EventRead:
    """Update an existing event; only supplied fields change."""
    return await EventService.update_event(db, event_id, payload, current_user)


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: int,
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
) -> MessageResponse:
    """Delete an event.

    Attendees registered for it are kept.  The confirmation is returned
    whether or not the event existed.
    """
    await EventService.delete_event(db, event_id, current_user)
    return MessageResponse(message="Event deleted")
