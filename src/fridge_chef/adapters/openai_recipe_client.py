"""OpenAI Responses API client for recipe generation."""

import json
from dataclasses import dataclass

import openai
from openai import AsyncOpenAI

from fridge_chef.domain.errors import (
    UpstreamFormatError,
    UpstreamUnavailable,
    upstream_status_error,
)
from fridge_chef.services.recipes import RecipeClient

_SERVICE = "openai"


@dataclass
class OpenAIRecipeClient(RecipeClient):
    """Recipe client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str, timeout: float = 60) -> "OpenAIRecipeClient":
        """Create an OpenAI recipe client."""
        return cls(client=AsyncOpenAI(api_key=api_key, timeout=timeout))

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> object:
        """Call OpenAI Responses API with structured outputs."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "recipe_list",
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        try:
            response = await self.client.responses.create(**request_payload)
        except openai.APIStatusError as exc:
            raise upstream_status_error(
                f"OpenAI returned HTTP {exc.status_code}",
                service=_SERVICE,
                status_code=exc.status_code,
            ) from exc
        except openai.APIError as exc:
            raise UpstreamUnavailable(
                f"OpenAI request failed: {type(exc).__name__}", service=_SERVICE
            ) from exc

        output_text = response.output_text
        if not output_text:
            raise UpstreamFormatError(
                "OpenAI returned an empty response", service=_SERVICE
            )
        try:
            return json.loads(output_text)
        except json.JSONDecodeError as exc:
            raise UpstreamFormatError(
                "Invalid JSON response from OpenAI", service=_SERVICE
            ) from exc
