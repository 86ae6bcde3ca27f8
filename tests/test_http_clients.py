"""Tests for HTTP-based adapters."""

import asyncio
import json

import pytest

from macrotrack.adapters.openai_extraction_client import OpenAIExtractionClient
from macrotrack.services.extraction import ExtractionError


class _FakeCompletions:
    def __init__(self, content: str | None, with_choice: bool = True) -> None:
        self.content = content
        self.with_choice = with_choice
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        message = type("Message", (), {"content": self.content})()
        choice = type("Choice", (), {"message": message})()
        choices = [choice] if self.with_choice else []
        return type("Resp", (), {"choices": choices})()


class _FakeOpenAI:
    def __init__(self, content: str | None, with_choice: bool = True) -> None:
        self.completions = _FakeCompletions(content, with_choice)
        self.chat = type("Chat", (), {"completions": self.completions})()


def _complete(client: OpenAIExtractionClient) -> dict[str, object]:
    return asyncio.run(
        client.complete_json(
            model="gpt-4o-mini",
            temperature=0.3,
            max_tokens=500,
            system_prompt="Parse notes",
            user_prompt="ate a banana",
        )
    )


def test_openai_extraction_client_parses_json_object() -> None:
    fake = _FakeOpenAI(json.dumps({"foods": [{"name": "Banana", "quantity": 1.0}]}))
    client = OpenAIExtractionClient(client=fake)

    result = _complete(client)

    assert result == {"foods": [{"name": "Banana", "quantity": 1.0}]}
    payload = fake.completions.last_payload
    assert payload is not None
    assert payload["response_format"] == {"type": "json_object"}
    assert payload["messages"] == [
        {"role": "system", "content": "Parse notes"},
        {"role": "user", "content": "ate a banana"},
    ]


@pytest.mark.parametrize(
    "fake",
    [
        _FakeOpenAI(None),
        _FakeOpenAI(""),
        _FakeOpenAI("[1, 2]"),
        _FakeOpenAI("{}", with_choice=False),
    ],
)
def test_openai_extraction_client_rejects_unusable_output(fake: _FakeOpenAI) -> None:
    client = OpenAIExtractionClient(client=fake)

    with pytest.raises(ExtractionError):
        _complete(client)


def test_openai_extraction_client_create() -> None:
    client = OpenAIExtractionClient.create(api_key="openai-key", timeout_seconds=5.0)

    assert client.client.max_retries == 0
    asyncio.run(client.close())
