"""PDF processing service using PyMuPDF."""

import fitz  # PyMuPDF
from typing import List

from app.core.logging import logger


class PDFService:
    """Service for rasterising in-memory PDFs."""

    @staticmethod
    def render_pages(pdf_bytes: bytes, zoom: float = 2.0) -> List[bytes]:
        """
        Convert PDF pages to PNG images for models without file input.
        Returns one PNG per page, or an empty list if the PDF is unreadable
        or encrypted.
        """
        images = []

        try:
            doc = fitz.open(stream=pdf_bytes, filetype="pdf")

            if doc.is_encrypted:
                logger.warning("PDF is encrypted, cannot render pages")
                doc.close()
                return []

            # Higher zoom keeps small print legible for the model
            mat = fitz.Matrix(zoom, zoom)
            for page in doc:
                pix = page.get_pixmap(matrix=mat)
                images.append(pix.tobytes("png"))

            logger.info(f"Rendered {len(images)} PDF pages")
            doc.close()

        except Exception as e:
            logger.error(f"Error converting PDF to images: {e}")
            return []

        return images
