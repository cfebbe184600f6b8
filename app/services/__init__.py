"""Business logic services."""

from app.services.inference_service import InferenceService
from app.services.ingestion_service import EncodedFile, IngestionService
from app.services.pdf_service import PDFService

__all__ = ["EncodedFile", "InferenceService", "IngestionService", "PDFService"]
