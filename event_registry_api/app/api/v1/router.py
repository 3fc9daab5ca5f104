"""
Top‑level router for the API.

This router aggregates the domain‑specific routers (auth, events,
attendees, dashboard).  ``main.create_app`` mounts it under ``/api``.
When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import attendees, auth, dashboard, events

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(events.router, prefix="/events", tags=["events"])
# The attendee router owns two top-level paths (``/attendees`` and
# ``/all-attendees``), so it is included without a prefix.
router.include_router(attendees.router, tags=["attendees"])
router.include_router(dashboard.router, tags=["dashboard"])
