# Reports Feature - Models

from enum import Enum
from typing import Optional
from beanie import Document, Indexed
from app.shared.models import TimestampMixin


class ReportStatus(str, Enum):
    """Display status of an uploaded report."""
    UPLOADED = "Uploaded"
    PENDING = "Pending"
    REVIEWED = "Reviewed"


class HealthReport(Document, TimestampMixin):
    """
    Health report document model.
    One uploaded medical report with the manual readings entered alongside it
    and the outcome of its AI analysis.
    """

    # Owner
    user_id: Indexed(str)

    # Report metadata
    report_type: str
    report_date: str  # YYYY-MM-DD
    file_name: str

    # Manual readings
    blood_pressure: Optional[str] = None
    sugar_level: Optional[str] = None
    weight: Optional[str] = None
    notes: Optional[str] = None

    # Analysis outcome
    status: str = ReportStatus.UPLOADED.value
    summary: Optional[str] = None
    analysis: Optional[dict] = None  # AnalysisResult keyed by wire names

    class Settings:
        name = "reports"
        use_state_management = True
        indexes = [
            [("user_id", 1), ("created_at", -1)],
        ]
