# Reports Feature - Service

from typing import List, Tuple
from bson import ObjectId

from app.config import settings
from app.core.logging import logger
from app.features.reports.models import HealthReport, ReportStatus
from app.features.reports.schemas import ReportRecord
from app.graphs.report_analysis import run_report_analysis
from app.schemas.analysis import AnalysisResult, ReportDetails, ReportInput, build_fallback_result
from app.services.ingestion_service import IngestionService
from app.shared.exceptions import NotFoundException


UNAVAILABLE_SUMMARY = "AI analysis unavailable."


def derive_status(result: AnalysisResult) -> ReportStatus:
    """Reviewed wins over pending; neither flag means the report is only uploaded."""
    if result.reviewed:
        return ReportStatus.REVIEWED
    if result.pending:
        return ReportStatus.PENDING
    return ReportStatus.UPLOADED


def merge_analysis(details: ReportDetails, result: AnalysisResult) -> ReportRecord:
    """Build a new report record from the submitted details and an analysis result."""
    return ReportRecord.model_validate({
        **details.model_dump(),
        "status": derive_status(result),
        "summary": result.summary.english,
        "analysis": result,
    })


def unavailable_record(details: ReportDetails) -> ReportRecord:
    """Record used when the analysis call itself could not be completed."""
    if settings.ANALYSIS_SINGLE_FALLBACK:
        summary = build_fallback_result().summary.english
    else:
        summary = UNAVAILABLE_SUMMARY

    return ReportRecord.model_validate({
        **details.model_dump(),
        "status": ReportStatus.UPLOADED,
        "summary": summary,
    })


class ReportService:
    """Service class for report operations."""

    @staticmethod
    def _report_to_record(report: HealthReport) -> ReportRecord:
        """Convert HealthReport document to a report record."""
        return ReportRecord(
            id=str(report.id),
            report_type=report.report_type,
            report_date=report.report_date,
            file_name=report.file_name,
            blood_pressure=report.blood_pressure,
            sugar_level=report.sugar_level,
            weight=report.weight,
            notes=report.notes,
            status=report.status,
            summary=report.summary,
            analysis=AnalysisResult.model_validate(report.analysis) if report.analysis else None,
            created_at=report.created_at,
        )

    @staticmethod
    async def save_record(user_id: str, record: ReportRecord) -> ReportRecord:
        """Insert a new report record. Existing records are never modified."""
        report = HealthReport(
            user_id=user_id,
            report_type=record.report_type.value,
            report_date=record.report_date.isoformat(),
            file_name=record.file_name,
            blood_pressure=record.blood_pressure,
            sugar_level=record.sugar_level,
            weight=record.weight,
            notes=record.notes,
            status=record.status.value,
            summary=record.summary,
            analysis=record.analysis.model_dump(by_alias=True) if record.analysis else None,
        )
        await report.insert()

        logger.info(f"Saved report {report.id} for user {user_id} with status {report.status}")

        return ReportService._report_to_record(report)

    @staticmethod
    async def analyse_upload(user_id: str, details: ReportDetails, data: bytes) -> ReportRecord:
        """
        Encode an uploaded file, run the analysis pipeline on it, and store
        the merged record.

        Args:
            user_id: Owner of the report
            details: Report type, date, manual readings and file name
            data: Raw bytes of the uploaded file

        Returns:
            The stored report record
        """
        encoded = IngestionService.encode_bytes(data, details.file_name)
        report_input = ReportInput.model_validate({
            **details.model_dump(),
            "encoded_file": encoded.encoded_file,
        })

        try:
            result, succeeded = await run_report_analysis(report_input)
        except Exception as e:
            logger.exception(f"Analysis pipeline unavailable for {details.file_name}: {e}")
            return await ReportService.save_record(user_id, unavailable_record(details))

        if not succeeded:
            logger.warning(f"Storing fallback analysis for {details.file_name}")

        record = merge_analysis(details, result)
        return await ReportService.save_record(user_id, record)

    @staticmethod
    async def list_reports(user_id: str, limit: int = 50, offset: int = 0) -> Tuple[List[ReportRecord], int]:
        """
        Get a user's reports, newest first.

        Returns:
            Tuple of (records list, total count)
        """
        query = HealthReport.find(HealthReport.user_id == user_id).sort([("created_at", -1)])

        total = await query.count()
        reports = await query.skip(offset).limit(limit).to_list()

        return [ReportService._report_to_record(r) for r in reports], total

    @staticmethod
    async def _get_owned_report(user_id: str, report_id: str) -> HealthReport:
        if not ObjectId.is_valid(report_id):
            raise NotFoundException("Report not found")

        report = await HealthReport.get(ObjectId(report_id))
        if not report or report.user_id != user_id:
            raise NotFoundException("Report not found")

        return report

    @staticmethod
    async def get_report(user_id: str, report_id: str) -> ReportRecord:
        report = await ReportService._get_owned_report(user_id, report_id)
        return ReportService._report_to_record(report)

    @staticmethod
    async def delete_report(user_id: str, report_id: str) -> None:
        report = await ReportService._get_owned_report(user_id, report_id)
        await report.delete()
        logger.info(f"Deleted report {report_id} for user {user_id}")
