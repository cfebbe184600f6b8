"""Tests for turning analysis results into report records."""

import pytest

from app.config import settings
from app.features.reports.models import ReportStatus
from app.features.reports.service import (
    UNAVAILABLE_SUMMARY,
    derive_status,
    merge_analysis,
    unavailable_record,
)
from app.schemas.analysis import AnalysisResult, build_fallback_result


@pytest.mark.parametrize("reviewed, pending, expected", [
    (True, True, ReportStatus.REVIEWED),
    (True, False, ReportStatus.REVIEWED),
    (False, True, ReportStatus.PENDING),
    (False, False, ReportStatus.UPLOADED),
])
def test_status_derivation(valid_analysis, reviewed, pending, expected):
    valid_analysis.update(reviewed=reviewed, pending=pending)

    assert derive_status(AnalysisResult.model_validate(valid_analysis)) == expected


def test_merge_copies_details_and_summary(report_details, valid_analysis):
    result = AnalysisResult.model_validate(valid_analysis)

    record = merge_analysis(report_details, result)

    assert record.id is None
    assert record.status == ReportStatus.PENDING
    assert record.summary == "White cell count is raised."
    assert record.analysis == result
    assert record.file_name == "blood_report.pdf"
    assert record.blood_pressure == "120/80"
    assert record.report_type.value == "Blood Test"


def test_merge_of_fallback_is_pending(report_details):
    record = merge_analysis(report_details, build_fallback_result())

    assert record.status == ReportStatus.PENDING
    assert record.summary == "Analysis failed."


def test_merge_does_not_touch_details(report_details, valid_analysis):
    before = report_details.model_dump()

    merge_analysis(report_details, AnalysisResult.model_validate(valid_analysis))

    assert report_details.model_dump() == before


def test_unavailable_record(report_details):
    record = unavailable_record(report_details)

    assert record.status == ReportStatus.UPLOADED
    assert record.summary == UNAVAILABLE_SUMMARY == "AI analysis unavailable."
    assert record.analysis is None


def test_single_fallback_policy(monkeypatch, report_details):
    monkeypatch.setattr(settings, "ANALYSIS_SINGLE_FALLBACK", True)

    record = unavailable_record(report_details)

    assert record.status == ReportStatus.UPLOADED
    assert record.summary == "Analysis failed."


def test_record_serializes_with_client_field_names(report_details, valid_analysis):
    record = merge_analysis(report_details, AnalysisResult.model_validate(valid_analysis))

    data = record.model_dump(mode="json", by_alias=True)

    assert data["type"] == "Blood Test"
    assert data["date"] == "2025-10-15"
    assert data["fileName"] == "blood_report.pdf"
    assert data["bp"] == "120/80"
    assert data["status"] == "Pending"
    assert data["analysis"]["summary"]["romanUrdu"] == "WBC zyada hai."
