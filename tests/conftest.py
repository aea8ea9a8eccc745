"""Общие фикстуры: изоляция настроек и конфигурации structlog между тестами."""

import pytest
import structlog

from src.core.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Чистые настройки и structlog по умолчанию для каждого теста."""
    for name in ("BIGINT_TRACE_DIGITS", "BIGINT_LOG_LEVEL", "BIGINT_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
