"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime

import pytest

from macrotrack.config import Settings
from macrotrack.containers import AppContainer
from macrotrack.services.cache import InMemoryCache
from macrotrack.services.catalog import DEFAULT_CATALOG
from macrotrack.services.coach_notes import CoachNotesService
from macrotrack.services.extraction import ExtractionClient, ExtractionService

# A Wednesday.
NOW = datetime(2025, 11, 12, 9, 30)


@dataclass
class FakeExtractionClient(ExtractionClient):
    """Fake extraction client returning queued payloads in order."""

    payloads: list[dict[str, object]] = field(
        default_factory=lambda: [
            {
                "date": "today",
                "foods": [{"name": "Big Mac", "quantity": 1.0}],
                "water_ounces": 16,
                "workouts": [
                    {
                        "type": "cardio",
                        "cardio_type": "Run",
                        "strength_exercise": None,
                        "duration": None,
                        "distance": 2.0,
                        "sets": None,
                        "reps": None,
                    }
                ],
            }
        ]
    )
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete_json(  # noqa: PLR0913
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> dict[str, object]:
        self.calls.append(
            {
                "model": model,
                "max_tokens": max_tokens,
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
            }
        )
        if self.error is not None:
            raise self.error
        return self.payloads.pop(0)


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def offline_settings() -> Settings:
    return Settings(openai_api_key=None, ai_parsing_enabled=False)


@pytest.fixture
def extraction_client() -> FakeExtractionClient:
    return FakeExtractionClient()


@pytest.fixture
def extraction_service(extraction_client: FakeExtractionClient) -> ExtractionService:
    return ExtractionService(client=extraction_client, cache=InMemoryCache())


@pytest.fixture
def container(
    settings: Settings, extraction_service: ExtractionService
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=DEFAULT_CATALOG,
        coach_notes_service=CoachNotesService(
            catalog=DEFAULT_CATALOG,
            extraction_service=extraction_service,
        ),
        close_resources=close_resources,
    )
