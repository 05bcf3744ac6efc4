"""Shared pytest fixtures."""

import pytest
import structlog

from bits_translator.configuration import Settings, TranslatorSettings
from bits_translator.services import get_settings


@pytest.fixture(autouse=True)
def reset_structlog():
    """Start every test from structlog's default configuration, without output."""
    structlog.reset_defaults()
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make get_settings() read the environment of the current test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def translator_env(monkeypatch):
    """Remove translator variables inherited from the outer environment."""
    for name in (
        "TRANSLATOR_LANG",
        "TRANSLATOR_FALLBACK_LANG",
        "TRANSLATOR_DISABLE_JS_OPTIONS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def default_settings(translator_env):
    """Settings without any translator defaults."""
    return Settings(translator=TranslatorSettings())
