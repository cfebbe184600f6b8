"""HTTP client for the report analysis endpoint."""

from typing import Optional

import httpx
from pydantic import ValidationError

from app.config import settings
from app.core.logging import logger
from app.features.reports.schemas import ReportRecord
from app.features.reports.service import merge_analysis, unavailable_record
from app.schemas.analysis import AnalysisResult, ReportDetails
from app.services.ingestion_service import IngestionService
from app.shared.exceptions import AnalysisClientError


class AnalysisClient:
    """
    Calls /ai-process-report and turns the answer into a report record.

    One request per submission, no retries. Error responses are still read,
    since the endpoint puts a fallback analysis in the body of a 500.
    """

    def __init__(
        self,
        base_url: str,
        access_token: Optional[str] = None,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        headers = {"Authorization": f"Bearer {access_token}"} if access_token else {}
        self.client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )
        self.analysis_path = f"{settings.API_V1_PREFIX}/ai-process-report"

    async def __aenter__(self) -> "AnalysisClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def request_analysis(self, details: ReportDetails, encoded_file: str) -> AnalysisResult:
        """
        Post one report for analysis.

        Raises AnalysisClientError on network errors and on replies whose
        body is not an analysis result, whatever their status code.
        """
        payload = {
            "report": details.model_dump(mode="json", by_alias=True, exclude_none=True),
            "fileBase64": encoded_file,
        }

        try:
            response = await self.client.post(self.analysis_path, json=payload)
        except httpx.HTTPError as e:
            raise AnalysisClientError(f"Analysis request failed: {e}") from e

        if response.is_error:
            logger.warning(f"Analysis endpoint answered HTTP {response.status_code}")

        try:
            return AnalysisResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise AnalysisClientError(
                f"Unreadable analysis response (HTTP {response.status_code})"
            ) from e

    async def submit_report(self, details: ReportDetails, file_path: str) -> ReportRecord:
        """
        Encode a local file, request its analysis and build the new record.

        An unreadable file raises IngestionError before any request is made.
        If the request itself fails the record is kept as "Uploaded" with a
        note that the analysis is unavailable.
        """
        encoded = IngestionService.encode_file(file_path)
        if not details.file_name:
            details = details.model_copy(update={"file_name": encoded.file_name})

        try:
            result = await self.request_analysis(details, encoded.encoded_file)
        except AnalysisClientError as e:
            logger.error(f"Analysis unavailable for {details.file_name}: {e}")
            return unavailable_record(details)

        return merge_analysis(details, result)
