from indenture.extraction.adapter import ExtractionAdapter
from indenture.extraction.base import BaseTextExtractionService
from indenture.extraction.factory import TextExtractionServiceFactory

__all__ = ["BaseTextExtractionService", "ExtractionAdapter", "TextExtractionServiceFactory"]
