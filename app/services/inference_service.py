"""OpenAI multimodal service for report analysis."""

from typing import List, Optional

from openai import OpenAI

from app.config import settings
from app.core.logging import logger
from app.services.ingestion_service import IngestionService, PDF_MIME_TYPE
from app.services.pdf_service import PDFService
from app.shared.exceptions import InferenceError


class InferenceService:
    """Service for sending a report file and prompt to GPT-4o."""

    def __init__(self, client: Optional[OpenAI] = None):
        self._client = client

    @property
    def client(self) -> OpenAI:
        """Create the OpenAI client on first use so a missing key only fails the call."""
        if self._client is None:
            if not settings.OPENAI_API_KEY:
                raise InferenceError("OPENAI_API_KEY is not configured")
            self._client = OpenAI(api_key=settings.OPENAI_API_KEY)
        return self._client

    @staticmethod
    def build_file_parts(file_name: str, mime_type: str, encoded_file: str) -> List[dict]:
        """
        Build the message content parts carrying the file.
        Images go in as image_url parts. PDFs go in as a single file part,
        or as one image per page when PDF_TRANSPORT is "images".
        """
        payload = IngestionService.extract_payload(encoded_file)

        if mime_type != PDF_MIME_TYPE:
            return [
                {
                    "type": "image_url",
                    "image_url": {
                        "url": f"data:{mime_type};base64,{payload}",
                        "detail": "high",
                    },
                }
            ]

        if settings.PDF_TRANSPORT == "images":
            pdf_bytes = IngestionService.decode_payload(encoded_file)
            pages = PDFService.render_pages(pdf_bytes, zoom=settings.PDF_RENDER_ZOOM)
            if not pages:
                raise InferenceError(f"No renderable pages in {file_name}")
            return [
                {
                    "type": "image_url",
                    "image_url": {
                        "url": IngestionService.to_data_url(page, "image/png"),
                        "detail": "high",
                    },
                }
                for page in pages
            ]

        return [
            {
                "type": "file",
                "file": {
                    "filename": file_name,
                    "file_data": f"data:{PDF_MIME_TYPE};base64,{payload}",
                },
            }
        ]

    def generate(self, prompt: str, file_name: str, mime_type: str, encoded_file: str) -> str:
        """
        Send the prompt and file in one request and return the raw reply text.
        Errors from the API propagate unchanged; there is no retry.
        """
        content = [{"type": "text", "text": prompt}]
        content.extend(self.build_file_parts(file_name, mime_type, encoded_file))

        logger.info(f"Requesting analysis of {file_name} ({mime_type}) from {settings.OPENAI_MODEL}")

        response = self.client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=[{"role": "user", "content": content}],
            max_tokens=settings.OPENAI_MAX_TOKENS,
            temperature=settings.OPENAI_TEMPERATURE,
        )

        result_text = response.choices[0].message.content
        if not result_text:
            raise InferenceError("Model returned an empty response")

        logger.debug(f"Model raw response: {result_text[:500]}...")
        return result_text
