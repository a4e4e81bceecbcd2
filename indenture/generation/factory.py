from typing import ClassVar

from indenture.config.settings import Settings
from indenture.generation.client_base import BaseGenerationClient
from indenture.generation.example_client_adapter import ExampleClientAdapter
from indenture.generation.openai_client_adapter import OpenAIClientAdapter


class GenerationClientFactory:
    """Creates the configured generation client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseGenerationClient:
        """Create a generation client from application settings."""
        provider = settings.generation_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.generation_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "generation_openai_compatible_base_url is required for "
                    "generation_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown generation provider '{provider}'. Choose from: {cls.supported_providers()}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.generation_openai_api_key,
            "openai_compatible": settings.generation_openai_compatible_api_key,
            "openrouter": settings.generation_openrouter_api_key,
            "groq": settings.generation_groq_api_key,
            "together": settings.generation_together_api_key,
            "deepseek": settings.generation_deepseek_api_key,
            "ollama": settings.generation_ollama_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        if provider == "openai_compatible":
            return settings.generation_openai_compatible_timeout_seconds
        return settings.generation_openai_timeout_seconds
