import json

import httpx
import openai

from indenture.generation.client_base import BaseGenerationClient
from indenture.generation.exceptions import GenerationError, GenerationNetworkError


class OpenAIClientAdapter(BaseGenerationClient):
    """Generation client built on the OpenAI-compatible chat completions API."""

    SCHEMA_NAME = "bond_indenture_summary"

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate_text(
        self,
        *,
        prompt: str,
        model: str,
        max_output_tokens: int,
    ) -> str:
        return self._complete(
            model=model,
            max_tokens=max_output_tokens,
            messages=[{"role": "user", "content": prompt}],
        )

    def generate_object(
        self,
        *,
        prompt: str,
        model: str,
        json_schema: dict[str, object],
    ) -> object:
        content = self._complete(
            model=model,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": self.SCHEMA_NAME,
                    "strict": True,
                    "schema": json_schema,
                },
            },
            messages=[{"role": "user", "content": prompt}],
        )
        return _parse_json(content)

    def _complete(self, **kwargs: object) -> str:
        try:
            response = self._client.chat.completions.create(**kwargs)  # type: ignore[call-overload]
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise GenerationNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise GenerationError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise GenerationError("AI returned empty response")
        return content


def _parse_json(raw: str) -> object:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise GenerationError(f"Invalid JSON response: {exc}") from exc
