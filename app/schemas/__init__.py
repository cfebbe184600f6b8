"""Pydantic schemas for API requests/responses."""

from app.schemas.analysis import (
    DISCLAIMER,
    AnalysisResult,
    AnalysisSummary,
    AnalyzeReportRequest,
    ContentKind,
    FoodGuidance,
    ReportDetails,
    ReportInput,
    ReportType,
    build_fallback_result,
)

__all__ = [
    "DISCLAIMER",
    "AnalysisResult",
    "AnalysisSummary",
    "AnalyzeReportRequest",
    "ContentKind",
    "FoodGuidance",
    "ReportDetails",
    "ReportInput",
    "ReportType",
    "build_fallback_result",
]
