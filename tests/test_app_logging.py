"""Tests for logging configuration."""

import logging

from fastapi.testclient import TestClient

from macrotrack.api.app import create_app
from macrotrack.app_logging import LOGGER_NAME, configure_logging
from macrotrack.containers import AppContainer


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging("debug")
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG
    assert not logger.propagate


def test_create_app_applies_configured_level(container: AppContainer) -> None:
    container.settings.log_level = "warning"

    TestClient(create_app(container))

    assert logging.getLogger(LOGGER_NAME).level == logging.WARNING
