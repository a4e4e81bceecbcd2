class GenerationError(Exception):
    """Raised when a text or structured generation call fails."""


class GenerationNetworkError(GenerationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
