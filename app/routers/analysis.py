"""Report analysis endpoint."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.core.logging import logger
from app.features.auth.models import User
from app.features.auth.dependencies import get_current_user
from app.graphs.report_analysis import run_report_analysis
from app.schemas.analysis import AnalysisResult, AnalyzeReportRequest, ReportInput

router = APIRouter(tags=["Report Analysis"])

MISSING_ERROR = "Missing report or file"
INVALID_ERROR = "Invalid report details"

# An absent or empty required field counts as missing
MISSING_ERROR_TYPES = {"missing", "string_too_short"}


@router.post(
    "/ai-process-report",
    response_model=AnalysisResult,
    responses={
        400: {"description": "Missing report or file, or invalid report details"},
        500: {"model": AnalysisResult, "description": "Analysis failed, fallback result in body"},
    },
)
async def process_report(
    request: AnalyzeReportRequest,
    current_user: User = Depends(get_current_user),
):
    """
    Analyse one medical report with the AI model.

    The body carries the report details and the file as a data URL
    (`data:<mime>;base64,<payload>`).

    On success the validated analysis is returned. If the model call fails
    or its output does not match the schema, a fixed fallback analysis is
    returned with status 500, so clients should read the body on errors too.
    """
    if not request.report or not request.file_base64:
        return JSONResponse(status_code=400, content={"error": MISSING_ERROR})

    try:
        report_input = ReportInput.model_validate({
            **request.report,
            "encodedFile": request.file_base64,
        })
    except ValidationError as e:
        logger.warning(f"Rejected report details from user {current_user.id}: {e.error_count()} errors")
        missing = any(err["type"] in MISSING_ERROR_TYPES for err in e.errors())
        return JSONResponse(
            status_code=400,
            content={"error": MISSING_ERROR if missing else INVALID_ERROR},
        )

    logger.info(f"Analysis requested by user {current_user.id} for {report_input.file_name}")

    result, succeeded = await run_report_analysis(report_input)

    if not succeeded:
        return JSONResponse(status_code=500, content=result.model_dump(by_alias=True))

    return result
