"""BigInt engine settings and logging setup.

Configuration priority (highest to lowest):
1. Environment variables (BIGINT_TRACE_DIGITS, BIGINT_LOG_LEVEL, BIGINT_LOG_JSON)
2. .env file
3. Default values
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BigIntSettings(BaseSettings):
    """Runtime options of the arithmetic engine.

    Example .env:
        BIGINT_TRACE_DIGITS=true
        BIGINT_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="BIGINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    trace_digits: Annotated[
        bool,
        Field(description="Emit a bigint.digit_pushed debug event per parsed digit"),
    ] = False

    log_level: Annotated[
        str,
        Field(description="Minimum log level", examples=["DEBUG", "INFO"]),
    ] = "INFO"

    log_json: Annotated[
        bool,
        Field(description="Render log events as JSON instead of console lines"),
    ] = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to an upper-case standard level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            msg = f"log_level must be one of {_LOG_LEVELS}, got {v!r}"
            raise ValueError(msg)
        return level


@lru_cache
def get_settings() -> BigIntSettings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once from environment.
    Call get_settings.cache_clear() after changing the environment.
    """
    return BigIntSettings()


def configure_logging(settings: BigIntSettings | None = None) -> None:
    """Configure structlog processors and level filter from settings."""
    settings = settings or get_settings()

    renderer: structlog.types.Processor
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        cache_logger_on_first_use=False,
    )
