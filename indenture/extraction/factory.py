from indenture.config.settings import Settings
from indenture.extraction.base import BaseTextExtractionService
from indenture.extraction.pdfplumber_service import PdfPlumberService
from indenture.extraction.pymupdf_service import PyMuPdfService


class TextExtractionServiceFactory:
    """Creates the text extraction service named by settings."""

    SERVICES: dict[str, type[BaseTextExtractionService]] = {
        "pdfplumber": PdfPlumberService,
        "pymupdf": PyMuPdfService,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractionService:
        engine = settings.pdf_engine.lower()
        service_cls = cls.SERVICES.get(engine)
        if service_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.SERVICES)}"
            )
        return service_cls()
