"""
Business logic for attendee registration.

A registration checks for an existing attendee with the same
``(event_id, email)`` pair, inserts the attendee and bumps the event's
``attendees_total`` counter.  All three steps run in one transaction,
and the ``UNIQUE(event_id, email)`` constraint on the ``attendees``
table rejects a duplicate even if two requests pass the lookup at the
same time, so the counter always matches the number of attendee rows.
"""

import logging
import sqlite3
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from event_registry_api.app.core.db import Database
from event_registry_api.app.core.errors import DuplicateRegistration, NotFound, ValidationError
from event_registry_api.app.schemas.attendee import AttendeeCreate, AttendeeRead

logger = logging.getLogger(__name__)

_ATTENDEE_COLUMNS = "id, name, email, phone, event_id"


def _row_to_attendee(row: sqlite3.Row) -> AttendeeRead:
    return AttendeeRead(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        phone=row["phone"],
        event_id=row["event_id"],
    )


class AttendeeService:
    """Service for registering and listing attendees."""

    @classmethod
    async def register(cls, db: Database, payload: Dict[str, Any], current_user: dict) -> AttendeeRead:
        """Register an attendee for an event.

        Raises ``ValidationError`` for a malformed payload, ``NotFound``
        if the event does not exist and ``DuplicateRegistration`` if the
        email is already registered for that event.  Nothing is written
        when an error is raised.
        """
        try:
            data = AttendeeCreate.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc, "Attendee") from exc

        with db.transaction() as cursor:
            event = cursor.execute("SELECT id FROM events WHERE id = ?", (data.event_id,)).fetchone()
            if not event:
                raise NotFound("Event not found")
            existing = cursor.execute(
                "SELECT id FROM attendees WHERE event_id = ? AND email = ?",
                (data.event_id, data.email),
            ).fetchone()
            if existing:
                logger.warning("Duplicate registration of %s for event %s", data.email, data.event_id)
                raise DuplicateRegistration("You are already registered for this event")
            try:
                cursor.execute(
                    """
                    INSERT INTO attendees (name, email, phone, event_id)
                    VALUES (?, ?, ?, ?)
                    """,
                    (data.name, data.email, data.phone, data.event_id),
                )
            except sqlite3.IntegrityError as exc:
                logger.warning("Duplicate registration of %s for event %s", data.email, data.event_id)
                raise DuplicateRegistration("You are already registered for this event") from exc
            attendee_id = cursor.lastrowid
            cursor.execute(
                "UPDATE events SET attendees_total = attendees_total + 1 WHERE id = ?",
                (data.event_id,),
            )
        logger.info(
            "User %s registered attendee %s for event %s",
            current_user.get("username"),
            attendee_id,
            data.event_id,
        )
        return AttendeeRead(id=attendee_id, **data.model_dump())

    @classmethod
    async def list_attendees(cls, db: Database) -> List[AttendeeRead]:
        with db.transaction() as cursor:
            rows = cursor.execute(f"SELECT {_ATTENDEE_COLUMNS} FROM attendees ORDER BY id").fetchall()
        return [_row_to_attendee(row) for row in rows]

    @classmethod
    async def list_by_event(cls, db: Database, event_id: int) -> List[AttendeeRead]:
        """Return the attendees of one event; an unknown event yields an empty list."""
        with db.transaction() as cursor:
            rows = cursor.execute(
                f"SELECT {_ATTENDEE_COLUMNS} FROM attendees WHERE event_id = ? ORDER BY id",
                (event_id,),
            ).fetchall()
        return [_row_to_attendee(row) for row in rows]
