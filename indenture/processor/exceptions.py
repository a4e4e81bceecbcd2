class ProcessorError(Exception):
    """Base exception for all pipeline errors."""


class InvalidFileFormatError(ProcessorError):
    """Raised when an upload is not a non-empty PDF within the size limit."""


class TextExtractionError(ProcessorError):
    """Raised when both the direct and the chunked extraction attempts fail."""


class InsufficientContentError(ProcessorError):
    """Raised when extraction yields too little text to analyse."""


class AnalysisError(ProcessorError):
    """Raised when the AI analysis call fails or returns nothing."""


class SummaryGenerationError(ProcessorError):
    """Raised when the structured summary call fails."""


class SummaryDataError(ProcessorError):
    """Raised when the structured summary response is not an object at all."""


class StepTransitionError(ProcessorError):
    """Raised on an attempt to move a finished step to another status."""


class DocumentNotFoundError(ProcessorError):
    """Raised when a document cannot be found in the record store."""
