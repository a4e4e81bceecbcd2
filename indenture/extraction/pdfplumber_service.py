import io

import pdfplumber

from indenture.extraction.base import BaseTextExtractionService
from indenture.extraction.exceptions import PdfExtractionError


class PdfPlumberService(BaseTextExtractionService):
    """Extracts text from PDF using pdfplumber."""

    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [page.extract_text() or "" for page in pdf.pages]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
