"""Instruction text sent to the model alongside the report file."""

from app.schemas.analysis import ContentKind, DISCLAIMER, ReportDetails


RESPONSE_SHAPE = """{
  "reviewed": true|false,
  "pending": true|false,
  "highlights": ["..."],
  "summary": {"english": "...", "romanUrdu": "..."},
  "doctorQuestions": ["..."],
  "foods": {"avoid": ["..."], "recommend": ["..."]},
  "homeRemedies": ["..."],
  "note": "Always consult..."
}"""


def _or_placeholder(value, placeholder: str) -> str:
    """Missing or blank readings are shown to the model as a placeholder."""
    if value is None:
        return placeholder
    text = str(value)
    return text if text.strip() else placeholder


def build_analysis_prompt(report: ReportDetails, content_kind: ContentKind) -> str:
    """
    Build the analysis instruction for one report.

    The output depends only on its arguments. All six manual inputs are
    always listed, with "N/A" for a missing BP, sugar or weight reading and
    "None" for missing notes. Notes are passed through in full.
    """
    source = "document" if content_kind == ContentKind.DOCUMENT else "image"
    file_name = report.file_name or "report"

    return f"""You are a medical AI assistant. Read the uploaded {source} {file_name} ({report.report_type.value}) directly and analyze it.

Manual inputs:
- Report type: {report.report_type.value}
- Date: {report.report_date.isoformat()}
- BP: {_or_placeholder(report.blood_pressure, "N/A")}
- Sugar: {_or_placeholder(report.sugar_level, "N/A")} mg/dL
- Weight: {_or_placeholder(report.weight, "N/A")} kg
- Notes: {_or_placeholder(report.notes, "None")}

Do:
1. Highlight abnormal values (e.g., "WBC high: 15 (normal 4-11)")
2. Give English + Roman Urdu summary
3. Suggest 3-5 doctor questions
4. Suggest foods to avoid & better foods
5. Suggest 2-3 home remedies
6. End with: "{DISCLAIMER}"

Set "reviewed" to true when nothing in the report is urgent or unclear.
Set "pending" to true when the report needs a manual follow-up.

Respond ONLY with valid JSON matching this schema:
{RESPONSE_SHAPE}"""
