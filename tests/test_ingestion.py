"""Tests for file ingestion and encoding."""

import base64

import pytest

from app.schemas.analysis import ContentKind
from app.services.ingestion_service import IngestionService
from app.shared.exceptions import IngestionError
from tests.conftest import PDF_BYTES, PNG_BYTES


@pytest.mark.parametrize("file_name, expected", [
    ("blood_report.pdf", ContentKind.DOCUMENT),
    ("SCAN.PDF", ContentKind.DOCUMENT),
    ("Report.Pdf", ContentKind.DOCUMENT),
    ("xray.jpg", ContentKind.IMAGE),
    ("ecg.pdf.png", ContentKind.IMAGE),
    ("pdf", ContentKind.IMAGE),
    ("notes", ContentKind.IMAGE),
])
def test_content_kind_follows_pdf_extension(file_name, expected):
    assert IngestionService.get_content_kind(file_name) == expected


def test_sniff_image_mime():
    assert IngestionService.sniff_image_mime(PNG_BYTES) == "image/png"
    assert IngestionService.sniff_image_mime(b"\xff\xd8\xff\xe0rest") == "image/jpeg"
    assert IngestionService.sniff_image_mime(b"GIF89a....") == "image/gif"
    assert IngestionService.sniff_image_mime(b"RIFF\x10\x00\x00\x00WEBPVP8 ") == "image/webp"
    assert IngestionService.sniff_image_mime(b"hello") is None


def test_mime_type_for_documents_and_images():
    assert IngestionService.get_mime_type(ContentKind.DOCUMENT, PNG_BYTES) == "application/pdf"
    assert IngestionService.get_mime_type(ContentKind.IMAGE, PNG_BYTES) == "image/png"
    assert IngestionService.get_mime_type(ContentKind.IMAGE, b"unknown") == "image/jpeg"
    assert IngestionService.get_mime_type(ContentKind.IMAGE) == "image/jpeg"


def test_encode_bytes_builds_data_url():
    encoded = IngestionService.encode_bytes(PDF_BYTES, "blood_report.pdf")

    assert encoded.content_kind == ContentKind.DOCUMENT
    assert encoded.mime_type == "application/pdf"
    assert encoded.encoded_file.startswith("data:application/pdf;base64,")
    assert IngestionService.decode_payload(encoded.encoded_file) == PDF_BYTES


def test_encode_image_uses_sniffed_type():
    encoded = IngestionService.encode_bytes(PNG_BYTES, "xray.jpg")

    assert encoded.content_kind == ContentKind.IMAGE
    assert encoded.encoded_file.startswith("data:image/png;base64,")


def test_extract_payload_drops_prefix_up_to_first_comma():
    payload = base64.b64encode(b"abc").decode()

    assert IngestionService.extract_payload(f"data:image/jpeg;base64,{payload}") == payload
    assert IngestionService.extract_payload(payload) == payload


def test_decode_payload_rejects_invalid_base64():
    with pytest.raises(IngestionError):
        IngestionService.decode_payload("data:image/png;base64,@@not-base64@@")


def test_encode_file_reads_from_disk(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(PDF_BYTES)

    encoded = IngestionService.encode_file(str(path))

    assert encoded.file_name == "report.pdf"
    assert encoded.content_kind == ContentKind.DOCUMENT


def test_unreadable_file_raises_ingestion_error(tmp_path):
    with pytest.raises(IngestionError):
        IngestionService.encode_file(str(tmp_path / "missing.pdf"))
