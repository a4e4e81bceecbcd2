class PdfExtractionError(Exception):
    """Raised when a text extraction service cannot read the PDF."""
