# Dashboard Feature - Router

from fastapi import APIRouter, Depends
from app.features.auth.models import User
from app.features.auth.dependencies import get_current_user
from app.features.dashboard.schemas import DashboardStatsResponse
from app.features.dashboard.service import DashboardService


router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_dashboard_stats(
    current_user: User = Depends(get_current_user)
):
    """
    Get dashboard statistics for the current user.

    Returns:
    - Number of uploaded reports, split by status
    - Number of vitals readings
    - Latest reading of each vital type

    Requires authentication.
    """
    return await DashboardService.get_dashboard_stats(str(current_user.id))
