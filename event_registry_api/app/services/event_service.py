"""
Business logic for events.

``EventService`` implements create, paginated and filtered listing,
update and delete over the ``events`` table.  Every method takes the
``Database`` handle explicitly; no state is kept between calls.
Results are returned in insertion (``id``) order.
"""

import logging
import sqlite3
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from event_registry_api.app.core.db import Database
from event_registry_api.app.core.errors import NotFound, ValidationError
from event_registry_api.app.schemas.event import EventCreate, EventPage, EventRead, EventType, EventUpdate

logger = logging.getLogger(__name__)

_EVENT_COLUMNS = "id, name, description, attendees_total, date, type"
_REQUIRED_FIELDS = ("name", "date", "type")


def _row_to_event(row: sqlite3.Row) -> EventRead:
    return EventRead(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        attendees_total=row["attendees_total"] or 0,
        date=row["date"],
        type=row["type"],
    )


def _to_column_value(value: Any) -> Any:
    if isinstance(value, EventType):
        return value.value
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value


class EventService:
    """Create, list, update and delete events."""

    @classmethod
    async def create_event(cls, db: Database, payload: Dict[str, Any], current_user: dict) -> EventRead:
        """Validate and insert a new event, returning it with its generated id.

        Raises ``ValidationError`` when required fields are missing or
        ``type`` is not one of Conference, Workshop or Meetup.
        """
        try:
            data = EventCreate.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc, "Event") from exc
        with db.transaction() as cursor:
            cursor.execute(
                """
                INSERT INTO events (name, description, attendees_total, date, type)
                VALUES (?, ?, 0, ?, ?)
                """,
                (
                    data.name,
                    data.description,
                    _to_column_value(data.date),
                    _to_column_value(data.type),
                ),
            )
            event_id = cursor.lastrowid
        logger.info("User %s created event %s '%s'", current_user.get("username"), event_id, data.name)
        return EventRead(id=event_id, attendees_total=0, **data.model_dump())

    @classmethod
    async def list_events(
        cls,
        db: Database,
        page: int = 1,
        limit: int = 2,
        event_type: Optional[str] = None,
    ) -> EventPage:
        """Return one page of events and the number of events matching the filter.

        ``page`` is 1-based; the page skips ``(page - 1) * limit`` rows.
        When ``event_type`` is given only events of that type are
        returned and counted.
        """
        where = ""
        params: list = []
        if event_type:
            where = " WHERE type = ?"
            params.append(event_type)
        offset = (page - 1) * limit
        with db.transaction() as cursor:
            rows = cursor.execute(
                f"SELECT {_EVENT_COLUMNS} FROM events{where} ORDER BY id LIMIT ? OFFSET ?",
                (*params, limit, offset),
            ).fetchall()
            total = cursor.execute(f"SELECT COUNT(*) FROM events{where}", tuple(params)).fetchone()[0]
        return EventPage(events=[_row_to_event(row) for row in rows], total=total)

    @classmethod
    async def list_all_events(cls, db: Database) -> List[EventRead]:
        with db.transaction() as cursor:
            rows = cursor.execute(f"SELECT {_EVENT_COLUMNS} FROM events ORDER BY id").fetchall()
        return [_row_to_event(row) for row in rows]

    @classmethod
    async def update_event(
        cls, db: Database, event_id: int, payload: Dict[str, Any], current_user: dict
    ) -> EventRead:
        """Merge the supplied fields into an existing event.

        Only keys present in ``payload`` are written.  Unknown keys and
        ``attendeesTotal`` are ignored.  Raises ``NotFound`` if the
        event does not exist and ``ValidationError`` if a supplied value
        is invalid or a required field is set to null.
        """
        try:
            updates = EventUpdate.model_validate(payload).model_dump(exclude_unset=True)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc, "Event") from exc
        nulled = [key for key in _REQUIRED_FIELDS if key in updates and updates[key] is None]
        if nulled:
            raise ValidationError(
                "Event validation failed: " + ", ".join(f"{key}: Field required" for key in nulled)
            )

        with db.transaction() as cursor:
            exists = cursor.execute("SELECT id FROM events WHERE id = ?", (event_id,)).fetchone()
            if not exists:
                raise NotFound("Event not found")
            if updates:
                fields = [f"{key} = ?" for key in updates]
                values = [_to_column_value(value) for value in updates.values()]
                values.append(event_id)
                cursor.execute(
                    f"UPDATE events SET {', '.join(fields)}, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                    tuple(values),
                )
            row = cursor.execute(
                f"SELECT {_EVENT_COLUMNS} FROM events WHERE id = ?", (event_id,)
            ).fetchone()
        logger.info(
            "User %s updated event %s (%s)",
            current_user.get("username"),
            event_id,
            ", ".join(updates) or "no changes",
        )
        return _row_to_event(row)

    @classmethod
    async def delete_event(cls, db: Database, event_id: int, current_user: dict) -> bool:
        """Delete an event.  Its attendee rows are left in place.

        Returns ``True`` if a row was removed.  A missing event is not an
        error; callers report the same confirmation either way.
        """
        with db.transaction() as cursor:
            cursor.execute("DELETE FROM events WHERE id = ?", (event_id,))
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("User %s deleted event %s", current_user.get("username"), event_id)
        else:
            logger.info("User %s asked to delete missing event %s", current_user.get("username"), event_id)
        return deleted
