from abc import ABC, abstractmethod

from indenture.extraction.chunking import chunk_text

DEFAULT_CHUNK_SIZE = 2000


class BaseTextExtractionService(ABC):
    """Contract for all PDF text extraction services."""

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        """Extract plain text of every page, in page order.

        Raises:
            PdfExtractionError: if the document cannot be read.
        """

    def extract(
        self,
        pdf_bytes: bytes,
        *,
        chunking: bool = False,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> str | list[str]:
        """Extract document text, whole or as a list of chunks.

        Args:
            pdf_bytes: Raw PDF file content.
            chunking: Return a list of text chunks instead of one string.
            chunk_size: Target chunk length in characters.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
        text = "\n\n".join(page.strip() for page in self.extract_pages(pdf_bytes)).strip()
        if chunking:
            return chunk_text(text, chunk_size)
        return text
