"""Tests for container wiring."""

import asyncio

from macrotrack.config import Settings
from macrotrack.containers import build_container


def test_build_container_wires_ai_extraction(settings: Settings) -> None:
    container = build_container(settings)

    service = container.coach_notes_service.extraction_service
    assert service is not None
    assert service.model == settings.openai_model
    assert service.catalog is container.catalog
    asyncio.run(container.close_resources())


def test_build_container_without_key_uses_pattern_matching(
    offline_settings: Settings,
) -> None:
    container = build_container(offline_settings)

    assert container.coach_notes_service.extraction_service is None
    asyncio.run(container.close_resources())


def test_ai_configured_requires_enabled_flag_and_key() -> None:
    assert Settings(openai_api_key="key").ai_configured
    assert not Settings(openai_api_key="  ").ai_configured
    assert not Settings(openai_api_key="key", ai_parsing_enabled=False).ai_configured
