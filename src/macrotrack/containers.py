"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from macrotrack.adapters.openai_extraction_client import OpenAIExtractionClient
from macrotrack.config import Settings
from macrotrack.services.cache import InMemoryCache
from macrotrack.services.catalog import DEFAULT_CATALOG, FoodCatalog
from macrotrack.services.coach_notes import CoachNotesService
from macrotrack.services.extraction import ExtractionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    coach_notes_service: CoachNotesService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog = DEFAULT_CATALOG

    extraction_service: ExtractionService | None = None
    openai_client: OpenAIExtractionClient | None = None
    if resolved_settings.ai_configured:
        openai_client = OpenAIExtractionClient.create(
            api_key=resolved_settings.openai_api_key or "",
            timeout_seconds=resolved_settings.openai_timeout_seconds,
        )
        extraction_service = ExtractionService(
            client=openai_client,
            cache=InMemoryCache(),
            model=resolved_settings.openai_model,
            temperature=resolved_settings.openai_temperature,
            max_tokens=resolved_settings.openai_max_tokens,
            estimate_max_tokens=resolved_settings.openai_estimate_max_tokens,
            estimate_ttl_seconds=resolved_settings.estimate_ttl_seconds,
            catalog=catalog,
        )

    coach_notes_service = CoachNotesService(
        catalog=catalog,
        extraction_service=extraction_service,
    )

    async def close_resources() -> None:
        if openai_client is not None:
            await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        coach_notes_service=coach_notes_service,
        close_resources=close_resources,
    )
