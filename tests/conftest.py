"""
Pytest fixtures and configuration for the test suite.

Settings are cached and the "applib" logger is process-wide, so both are
reset around every test.
"""

import logging
from collections.abc import Generator

import pytest

from applib.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Start each test with no applib environment and an empty settings cache."""
    monkeypatch.delenv("APPLIB_LOG_LEVEL", raising=False)
    monkeypatch.delenv("APPLIB_LOG_DIR", raising=False)
    # Keep a developer's .env file from leaking into tests.
    monkeypatch.setattr("applib.config.settings.load_dotenv", lambda: False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def clean_logger() -> Generator[None, None, None]:
    """Detach any handlers configure_logging attached during a test."""
    logger = logging.getLogger("applib")
    saved = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in saved:
            logger.removeHandler(handler)
            handler.close()
