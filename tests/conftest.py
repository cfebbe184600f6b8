"""Shared fixtures for the HealthMate tests."""

import base64
import copy
import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.graphs.report_analysis import nodes
from app.schemas.analysis import ReportDetails, ReportInput


PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<<>>\nendobj\n%%EOF\n"

VALID_ANALYSIS = {
    "reviewed": False,
    "pending": True,
    "highlights": ["WBC high: 15 (normal 4-11)"],
    "summary": {
        "english": "White cell count is raised.",
        "romanUrdu": "WBC zyada hai.",
    },
    "doctorQuestions": ["Is this an infection?", "Do I need more tests?", "Should I repeat the CBC?"],
    "foods": {"avoid": ["Fried food"], "recommend": ["Yogurt", "Lentils"]},
    "homeRemedies": ["Rest", "Warm fluids"],
    "note": "Always consult your doctor before making any decision.",
}


def data_url(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('utf-8')}"


class FakeInferenceService:
    """Stands in for InferenceService and records every call."""

    calls = []
    response = json.dumps(VALID_ANALYSIS)
    error = None

    def generate(self, prompt, file_name, mime_type, encoded_file):
        FakeInferenceService.calls.append({
            "prompt": prompt,
            "file_name": file_name,
            "mime_type": mime_type,
            "encoded_file": encoded_file,
        })
        if FakeInferenceService.error is not None:
            raise FakeInferenceService.error
        return FakeInferenceService.response


@pytest.fixture
def valid_analysis():
    return copy.deepcopy(VALID_ANALYSIS)


@pytest.fixture
def fake_inference(monkeypatch):
    """Replace the model call in the pipeline with FakeInferenceService."""
    FakeInferenceService.calls = []
    FakeInferenceService.response = json.dumps(VALID_ANALYSIS)
    FakeInferenceService.error = None
    monkeypatch.setattr(nodes, "InferenceService", FakeInferenceService)
    return FakeInferenceService


@pytest.fixture
def report_details():
    return ReportDetails(
        report_type="Blood Test",
        report_date="2025-10-15",
        blood_pressure="120/80",
        sugar_level="95",
        weight="72",
        notes="Fasting sample",
        file_name="blood_report.pdf",
    )


@pytest.fixture
def pdf_report_input(report_details):
    return ReportInput.model_validate({
        **report_details.model_dump(),
        "encoded_file": data_url(PDF_BYTES, "application/pdf"),
    })
