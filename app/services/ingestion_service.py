"""Turns uploaded files into data-URL payloads the model can consume."""

import base64
import binascii
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from app.core.logging import logger
from app.schemas.analysis import ContentKind
from app.shared.exceptions import IngestionError


PDF_MIME_TYPE = "application/pdf"
DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"

# Leading bytes of the image formats the vision model accepts
IMAGE_SIGNATURES = [
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
]


class EncodedFile(BaseModel):
    """A file ready to be sent to the inference service."""
    file_name: str
    content_kind: ContentKind
    mime_type: str
    encoded_file: str                   # data:<mime>;base64,<payload>


class IngestionService:
    """Service for reading and encoding report files."""

    @staticmethod
    def get_content_kind(file_name: str) -> ContentKind:
        """PDFs are sent as documents, everything else as images."""
        if file_name.lower().endswith(".pdf"):
            return ContentKind.DOCUMENT
        return ContentKind.IMAGE

    @staticmethod
    def sniff_image_mime(data: bytes) -> Optional[str]:
        """Detect an image MIME type from its file signature."""
        for signature, mime_type in IMAGE_SIGNATURES:
            if data.startswith(signature):
                return mime_type
        if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
            return "image/webp"
        return None

    @staticmethod
    def get_mime_type(content_kind: ContentKind, data: Optional[bytes] = None) -> str:
        """
        MIME type announced to the model.
        Documents are always PDF; images use the sniffed type when the
        bytes are known and fall back to JPEG otherwise.
        """
        if content_kind == ContentKind.DOCUMENT:
            return PDF_MIME_TYPE
        if data:
            sniffed = IngestionService.sniff_image_mime(data)
            if sniffed:
                return sniffed
        return DEFAULT_IMAGE_MIME_TYPE

    @staticmethod
    def read_file(file_path: str) -> bytes:
        """Read a file from disk, raising IngestionError if it is unreadable."""
        try:
            with open(file_path, "rb") as f:
                return f.read()
        except OSError as e:
            logger.error(f"Could not read report file {file_path}: {e}")
            raise IngestionError(f"Could not read file: {Path(file_path).name}") from e

    @staticmethod
    def to_data_url(data: bytes, mime_type: str) -> str:
        encoded = base64.b64encode(data).decode("utf-8")
        return f"data:{mime_type};base64,{encoded}"

    @staticmethod
    def encode_bytes(data: bytes, file_name: str) -> EncodedFile:
        """Encode raw file bytes into a data URL with its content kind."""
        content_kind = IngestionService.get_content_kind(file_name)
        mime_type = IngestionService.get_mime_type(content_kind, data)

        logger.debug(f"Encoded {file_name}: {len(data)} bytes as {content_kind.value} ({mime_type})")

        return EncodedFile(
            file_name=file_name,
            content_kind=content_kind,
            mime_type=mime_type,
            encoded_file=IngestionService.to_data_url(data, mime_type),
        )

    @staticmethod
    def encode_file(file_path: str) -> EncodedFile:
        """Read and encode a file from disk."""
        data = IngestionService.read_file(file_path)
        return IngestionService.encode_bytes(data, Path(file_path).name)

    @staticmethod
    def extract_payload(encoded_file: str) -> str:
        """
        Return the base64 payload of a data URL.
        Everything up to the first comma is the prefix; a string without a
        comma is taken to be a bare payload.
        """
        _, separator, payload = encoded_file.partition(",")
        if not separator:
            return encoded_file.strip()
        return payload.strip()

    @staticmethod
    def decode_payload(encoded_file: str) -> bytes:
        """Decode the payload of a data URL back into bytes."""
        try:
            return base64.b64decode(IngestionService.extract_payload(encoded_file), validate=True)
        except (binascii.Error, ValueError) as e:
            raise IngestionError("File payload is not valid base64") from e
