from fastapi import APIRouter, Depends

from event_registry_api.app.core.db import Database, get_db
from event_registry_api.app.core.security import get_current_user
from event_registry_api.app.schemas.dashboard import DashboardSummary
from event_registry_api.app.services.dashboard_service import DashboardService


router = APIRouter()


@router.get("/dashboard", response_model=DashboardSummary)
async def dashboard(
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
) -> DashboardSummary:
    """Return ``{totalEvents, totalAttendees}``."""
    return await DashboardService.summary(db)
