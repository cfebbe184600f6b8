# Reports Feature - Router

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from app.config import settings
from app.core.logging import logger
from app.features.auth.models import User
from app.features.auth.dependencies import get_current_user
from app.features.reports.schemas import ReportRecord, ReportListResponse
from app.features.reports.service import ReportService
from app.schemas.analysis import ReportDetails, ReportType
from app.shared.exceptions import BadRequestException


router = APIRouter(prefix="/reports", tags=["Reports"])


@router.post("", response_model=ReportRecord)
async def upload_report(
    report_type: ReportType = Form(..., alias="type"),
    report_date: date = Form(..., alias="date"),
    bp: Optional[str] = Form(None),
    sugar: Optional[str] = Form(None),
    weight: Optional[str] = Form(None),
    notes: Optional[str] = Form(None),
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user)
):
    """
    Upload a report file and analyse it.

    Supported formats: PDF and common image types. The file is sent to the
    AI model together with the manual readings; the stored record carries
    the derived status and the English summary.
    """
    if not file.filename:
        raise BadRequestException("Missing report or file")

    try:
        data = await file.read()
    except OSError as e:
        logger.error(f"Could not read upload {file.filename}: {e}")
        raise BadRequestException("Could not read uploaded file")

    if not data:
        raise BadRequestException("Uploaded file is empty")

    if len(data) > settings.max_upload_bytes:
        raise BadRequestException(f"File exceeds {settings.MAX_UPLOAD_SIZE_MB} MB limit")

    details = ReportDetails(
        report_type=report_type,
        report_date=report_date,
        blood_pressure=bp,
        sugar_level=sugar,
        weight=weight,
        notes=notes,
        file_name=file.filename,
    )

    logger.info(f"Receiving report upload for user {current_user.id}, file: {file.filename}")

    return await ReportService.analyse_upload(str(current_user.id), details, data)


@router.get("", response_model=ReportListResponse)
async def list_reports(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    current_user: User = Depends(get_current_user)
):
    """Get the current user's reports, newest first."""
    reports, total = await ReportService.list_reports(
        user_id=str(current_user.id),
        limit=limit,
        offset=offset
    )

    return ReportListResponse(
        reports=reports,
        total=total,
        has_more=offset + len(reports) < total
    )


@router.get("/{report_id}", response_model=ReportRecord)
async def get_report(
    report_id: str,
    current_user: User = Depends(get_current_user)
):
    """Get one report including its full analysis."""
    return await ReportService.get_report(str(current_user.id), report_id)


@router.delete("/{report_id}")
async def delete_report(
    report_id: str,
    current_user: User = Depends(get_current_user)
):
    """Delete a report."""
    await ReportService.delete_report(str(current_user.id), report_id)
    return {"message": "Report deleted successfully"}
