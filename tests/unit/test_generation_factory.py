from unittest.mock import patch

import pytest

from indenture.config.settings import Settings
from indenture.generation.example_client_adapter import ExampleClientAdapter
from indenture.generation.factory import GenerationClientFactory


class TestGenerationClientFactory:
    def test_creates_example_client(self) -> None:
        client = GenerationClientFactory.create(Settings(generation_provider="example"))
        assert isinstance(client, ExampleClientAdapter)

    def test_openai_uses_default_base_url(self) -> None:
        settings = Settings(
            generation_provider="openai",
            generation_openai_api_key="sk-test",
            generation_openai_timeout_seconds=42,
        )
        with patch("indenture.generation.factory.OpenAIClientAdapter") as mock_adapter:
            GenerationClientFactory.create(settings)

        mock_adapter.assert_called_once_with(api_key="sk-test", timeout_seconds=42, base_url=None)

    def test_named_provider_uses_known_base_url(self) -> None:
        settings = Settings(generation_provider="Groq", generation_groq_api_key="gk")
        with patch("indenture.generation.factory.OpenAIClientAdapter") as mock_adapter:
            GenerationClientFactory.create(settings)

        kwargs = mock_adapter.call_args.kwargs
        assert kwargs["base_url"] == "https://api.groq.com/openai/v1"
        assert kwargs["api_key"] == "gk"

    def test_openai_compatible_uses_own_settings(self) -> None:
        settings = Settings(
            generation_provider="openai_compatible",
            generation_openai_compatible_base_url=" https://llm.internal/v1 ",
            generation_openai_compatible_api_key="ck",
            generation_openai_compatible_timeout_seconds=90,
        )
        with patch("indenture.generation.factory.OpenAIClientAdapter") as mock_adapter:
            GenerationClientFactory.create(settings)

        mock_adapter.assert_called_once_with(
            api_key="ck", timeout_seconds=90, base_url="https://llm.internal/v1"
        )

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(generation_provider="openai_compatible")
        with pytest.raises(ValueError, match="required"):
            GenerationClientFactory.create(settings)

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown generation provider"):
            GenerationClientFactory.create(Settings(generation_provider="nope"))

    def test_supported_providers(self) -> None:
        providers = GenerationClientFactory.supported_providers()
        assert "example" in providers
        assert "openai" in providers
        assert "ollama" in providers
