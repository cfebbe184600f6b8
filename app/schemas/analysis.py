"""Pydantic schemas for report analysis."""

from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
)


DISCLAIMER = "Always consult your doctor before making any decision."


class ReportType(str, Enum):
    """Kind of medical report a user can upload."""
    BLOOD_TEST = "Blood Test"
    X_RAY = "X-Ray"
    ECG = "ECG"
    MRI_SCAN = "MRI Scan"
    URINE_TEST = "Urine Test"
    OTHER = "Other"


class ContentKind(str, Enum):
    """How the uploaded file is presented to the model."""
    DOCUMENT = "document"
    IMAGE = "image"


# ============ REQUEST SCHEMAS ============

class ReportDetails(BaseModel):
    """Report metadata and manual readings as submitted by the client."""

    model_config = ConfigDict(populate_by_name=True)

    report_type: ReportType = Field(
        validation_alias=AliasChoices("type", "reportType", "report_type"),
        serialization_alias="type",
    )
    report_date: date = Field(
        validation_alias=AliasChoices("date", "report_date"),
        serialization_alias="date",
    )
    blood_pressure: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("bp", "bloodPressure", "blood_pressure"),
        serialization_alias="bp",
    )
    sugar_level: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("sugar", "sugarLevel", "sugar_level"),
        serialization_alias="sugar",
    )
    weight: Optional[str] = None
    notes: Optional[str] = None
    file_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("fileName", "file_name"),
        serialization_alias="fileName",
    )


class ReportInput(ReportDetails):
    """Everything the pipeline needs for one submission."""

    file_name: str = Field(
        min_length=1,
        validation_alias=AliasChoices("fileName", "file_name"),
        serialization_alias="fileName",
    )
    encoded_file: str = Field(
        min_length=1,
        validation_alias=AliasChoices("encodedFile", "encoded_file"),
        serialization_alias="encodedFile",
    )


class AnalyzeReportRequest(BaseModel):
    """Body of the analysis endpoint.

    Both fields are optional and the report is kept as a plain object so
    that missing or invalid details are answered with the endpoint's own
    400 body rather than a 422. The report is validated as ReportDetails
    inside the endpoint.
    """

    model_config = ConfigDict(populate_by_name=True)

    report: Optional[Dict[str, Any]] = Field(default=None, description="ReportDetails fields")
    file_base64: Optional[str] = Field(default=None, alias="fileBase64")


# ============ RESULT SCHEMAS ============

class AnalysisSummary(BaseModel):
    """Full-text summary in English and Roman Urdu."""

    model_config = ConfigDict(frozen=True)

    english: StrictStr
    roman_urdu: StrictStr = Field(alias="romanUrdu")


class FoodGuidance(BaseModel):
    """Foods to avoid and foods to prefer."""

    model_config = ConfigDict(frozen=True)

    avoid: List[StrictStr]
    recommend: List[StrictStr]


class AnalysisResult(BaseModel):
    """Validated structured analysis of one report.

    Every field is required and strictly typed: a model response that is
    missing a field or uses the wrong type is rejected as a whole.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "reviewed": False,
                "pending": True,
                "highlights": ["WBC high: 15 (normal 4-11)"],
                "summary": {
                    "english": "White cell count is raised, which can point to an infection.",
                    "romanUrdu": "WBC zyada hai, jo infection ki nishani ho sakti hai.",
                },
                "doctorQuestions": ["Do I need antibiotics?"],
                "foods": {"avoid": ["Fried food"], "recommend": ["Yogurt"]},
                "homeRemedies": ["Drink warm water"],
                "note": DISCLAIMER,
            }
        },
    )

    reviewed: StrictBool
    pending: StrictBool
    highlights: List[StrictStr]
    summary: AnalysisSummary
    doctor_questions: List[StrictStr] = Field(alias="doctorQuestions")
    foods: FoodGuidance
    home_remedies: List[StrictStr] = Field(alias="homeRemedies")
    note: StrictStr


def build_fallback_result() -> AnalysisResult:
    """The fixed result used whenever analysis fails after it has started."""
    return AnalysisResult(
        reviewed=False,
        pending=True,
        highlights=[],
        summary=AnalysisSummary(
            english="Analysis failed.",
            romanUrdu="Jaanch nahi ho saki.",
        ),
        doctorQuestions=["Please consult a doctor."],
        foods=FoodGuidance(avoid=[], recommend=[]),
        homeRemedies=[],
        note=DISCLAIMER,
    )
