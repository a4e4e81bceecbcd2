"""Two-attempt text extraction: whole document first, chunked as fallback."""

from collections.abc import Callable

from indenture.extraction.base import DEFAULT_CHUNK_SIZE, BaseTextExtractionService
from indenture.logging.logger import Log
from indenture.processor.exceptions import TextExtractionError

ProgressCallback = Callable[[str, int], None]

CHUNK_SEPARATOR = "\n\n"


class ExtractionAdapter:
    """Wraps a text extraction service with one chunked fallback attempt."""

    def __init__(
        self,
        service: BaseTextExtractionService,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._service = service
        self._chunk_size = chunk_size

    def extract(self, pdf_bytes: bytes, on_progress: ProgressCallback | None = None) -> str:
        """Return the document text.

        Raises:
            TextExtractionError: if the fallback attempt fails as well.
        """
        report = on_progress or _ignore_progress
        try:
            report("Attempting direct text extraction...", 20)
            text = self._service.extract(pdf_bytes)
            if not isinstance(text, str):
                raise TypeError("Invalid text extraction result")
            report("Text extracted successfully", 80)
            return text
        except Exception as exc:
            Log.warning(f"Primary extraction failed: {exc}")

        try:
            report("Trying chunked extraction method...", 40)
            chunks = self._service.extract(
                pdf_bytes, chunking=True, chunk_size=self._chunk_size
            )
            text = (
                CHUNK_SEPARATOR.join(str(c) for c in chunks)
                if isinstance(chunks, (list, tuple))
                else str(chunks)
            )
        except Exception as exc:
            Log.error(f"Fallback extraction failed: {exc}")
            raise TextExtractionError(
                f"Failed to extract text from PDF: {str(exc) or type(exc).__name__}. "
                "The document may be scanned, corrupted, or in an unsupported format."
            ) from exc

        report("Text extracted using chunked method", 80)
        return text


def _ignore_progress(message: str, progress: int) -> None:
    _ = message, progress
