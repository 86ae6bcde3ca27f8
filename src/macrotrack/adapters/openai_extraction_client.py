"""OpenAI chat completions client for coach note extraction."""

import json
from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI

from macrotrack.services.extraction import ExtractionClient, ExtractionError


@dataclass
class OpenAIExtractionClient(ExtractionClient):
    """Extraction client backed by OpenAI chat completions in JSON mode."""

    client: AsyncOpenAI

    @classmethod
    def create(
        cls, api_key: str, timeout_seconds: float = 15.0
    ) -> "OpenAIExtractionClient":
        """Create a client with a bounded request timeout."""
        return cls(
            client=AsyncOpenAI(
                api_key=api_key,
                timeout=httpx.Timeout(timeout_seconds),
                max_retries=0,
            )
        )

    async def complete_json(  # noqa: PLR0913
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> dict[str, object]:
        """Call chat completions and decode the JSON object it returns."""
        response = await self.client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
            response_format={"type": "json_object"},
        )
        if not response.choices:
            raise ExtractionError("OpenAI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise ExtractionError("OpenAI returned an empty response")
        payload = json.loads(content)
        if not isinstance(payload, dict):
            raise ExtractionError("OpenAI returned JSON that is not an object")
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
