# Reports Feature - Schemas

from typing import Optional, List
from datetime import datetime
from pydantic import AliasChoices, BaseModel, Field

from app.schemas.analysis import AnalysisResult, ReportDetails
from app.features.reports.models import ReportStatus


class ReportRecord(ReportDetails):
    """A report as stored and shown in the reports table."""

    id: Optional[str] = None
    file_name: str = Field(
        min_length=1,
        validation_alias=AliasChoices("fileName", "file_name"),
        serialization_alias="fileName",
    )
    status: ReportStatus = ReportStatus.UPLOADED
    summary: Optional[str] = None
    analysis: Optional[AnalysisResult] = None
    created_at: Optional[datetime] = None


class ReportListResponse(BaseModel):
    """Schema for paginated list of reports."""
    reports: List[ReportRecord]
    total: int
    has_more: bool
