"""
Service layer for dashboard counts.

All queries are read-only and unconditional: no filtering and no time
windowing.
"""

from event_registry_api.app.core.db import Database
from event_registry_api.app.schemas.dashboard import DashboardSummary


class DashboardService:

    @classmethod
    async def summary(cls, db: Database) -> DashboardSummary:
        """Return the total number of events and attendees."""
        with db.transaction() as cursor:
            events_count = cursor.execute("SELECT COUNT(*) FROM events").fetchone()[0]
            attendees_count = cursor.execute("SELECT COUNT(*) FROM attendees").fetchone()[0]
        return DashboardSummary(total_events=events_count, total_attendees=attendees_count)
