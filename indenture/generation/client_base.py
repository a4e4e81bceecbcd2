from abc import ABC, abstractmethod


class BaseGenerationClient(ABC):
    """Contract for provider-specific text and structured generation clients."""

    @abstractmethod
    def generate_text(
        self,
        *,
        prompt: str,
        model: str,
        max_output_tokens: int,
    ) -> str:
        """Return the provider's free-text completion for ``prompt``."""

    @abstractmethod
    def generate_object(
        self,
        *,
        prompt: str,
        model: str,
        json_schema: dict[str, object],
    ) -> object:
        """Return the provider's JSON response, decoded but not validated.

        The provider is asked to honour ``json_schema`` but nothing guarantees
        it did; callers must treat the result as untrusted.
        """
