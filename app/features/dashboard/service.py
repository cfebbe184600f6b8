# Dashboard Feature - Service

from typing import List

from app.features.dashboard.schemas import DashboardStatsResponse
from app.features.reports.models import HealthReport, ReportStatus
from app.features.vitals.schemas import VitalResponse
from app.features.vitals.service import VitalService


def latest_per_type(vitals: List[VitalResponse]) -> List[VitalResponse]:
    """Keep the first reading of each type from a most-recent-first list."""
    seen = {}
    for vital in vitals:
        seen.setdefault(vital.vital_type, vital)
    return list(seen.values())


class DashboardService:
    """Service for dashboard statistics."""

    @staticmethod
    async def get_dashboard_stats(user_id: str) -> DashboardStatsResponse:
        """
        Get dashboard statistics for a user.

        Args:
            user_id: The user ID

        Returns:
            DashboardStatsResponse with report and vitals counts
        """
        reports_count = await HealthReport.find(HealthReport.user_id == user_id).count()

        status_counts = {}
        for report_status in ReportStatus:
            status_counts[report_status] = await HealthReport.find(
                HealthReport.user_id == user_id,
                HealthReport.status == report_status.value
            ).count()

        vitals = await VitalService.list_vitals(user_id)

        return DashboardStatsResponse(
            reports_count=reports_count,
            vitals_count=len(vitals),
            reviewed_reports=status_counts[ReportStatus.REVIEWED],
            pending_reports=status_counts[ReportStatus.PENDING],
            uploaded_reports=status_counts[ReportStatus.UPLOADED],
            latest_vitals=latest_per_type(vitals),
        )
