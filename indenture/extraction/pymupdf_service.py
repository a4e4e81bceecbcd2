import pymupdf

from indenture.extraction.base import BaseTextExtractionService
from indenture.extraction.exceptions import PdfExtractionError


class PyMuPdfService(BaseTextExtractionService):
    """Extracts text from PDF using PyMuPDF."""

    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [page.get_text() for page in doc]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
