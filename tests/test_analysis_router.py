"""Tests for the /ai-process-report endpoint."""

import json
from types import SimpleNamespace

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.features.auth.dependencies import get_current_user
from app.routers import analysis_router
from app.schemas.analysis import build_fallback_result
from tests.conftest import PDF_BYTES, data_url


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(analysis_router, prefix="/api/v1")
    app.dependency_overrides[get_current_user] = lambda: SimpleNamespace(id="user-1")
    return TestClient(app)


def make_body(**report_overrides):
    report = {
        "type": "Blood Test",
        "date": "2025-10-15",
        "status": "Uploaded",
        "fileName": "blood_report.pdf",
        "bp": "120/80",
        "sugar": "95",
    }
    report.update(report_overrides)
    return {"report": report, "fileBase64": data_url(PDF_BYTES, "application/pdf")}


def test_successful_analysis(client, fake_inference, valid_analysis):
    response = client.post("/api/v1/ai-process-report", json=make_body())

    assert response.status_code == 200
    assert response.json() == valid_analysis

    prompt = fake_inference.calls[0]["prompt"]
    assert "- BP: 120/80" in prompt
    assert "- Sugar: 95 mg/dL" in prompt
    assert "- Weight: N/A kg" in prompt


def test_descriptive_field_names_are_accepted(client, fake_inference):
    body = make_body()
    report = body["report"]
    report["reportType"] = report.pop("type")
    report["bloodPressure"] = report.pop("bp")

    response = client.post("/api/v1/ai-process-report", json=body)

    assert response.status_code == 200
    assert "- BP: 120/80" in fake_inference.calls[0]["prompt"]


@pytest.mark.parametrize("body", [
    {},
    {"fileBase64": data_url(PDF_BYTES, "application/pdf")},
    {"report": make_body()["report"]},
    {"report": make_body()["report"], "fileBase64": ""},
    make_body(fileName=""),
])
def test_missing_report_or_file_is_rejected(client, fake_inference, body):
    response = client.post("/api/v1/ai-process-report", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing report or file"}
    assert fake_inference.calls == []


def test_missing_file_name_is_rejected(client, fake_inference):
    body = make_body()
    del body["report"]["fileName"]

    response = client.post("/api/v1/ai-process-report", json=body)

    assert response.status_code == 400
    assert fake_inference.calls == []


def test_model_failure_returns_fallback_body(client, fake_inference):
    fake_inference.error = RuntimeError("quota exceeded")

    response = client.post("/api/v1/ai-process-report", json=make_body())

    assert response.status_code == 500
    assert response.json() == build_fallback_result().model_dump(by_alias=True)


def test_invalid_model_output_returns_fallback_body(client, fake_inference, valid_analysis):
    del valid_analysis["note"]
    fake_inference.response = json.dumps(valid_analysis)

    response = client.post("/api/v1/ai-process-report", json=make_body())

    assert response.status_code == 500
    assert response.json()["summary"]["english"] == "Analysis failed."


def test_unknown_report_type_is_rejected(client, fake_inference):
    response = client.post("/api/v1/ai-process-report", json=make_body(type="CT Scan", date="15/10/2025"))

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid report details"}
    assert fake_inference.calls == []


@pytest.mark.parametrize("field", ["type", "date"])
def test_missing_required_detail_is_rejected(client, fake_inference, field):
    body = make_body()
    del body["report"][field]

    response = client.post("/api/v1/ai-process-report", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing report or file"}
    assert fake_inference.calls == []
