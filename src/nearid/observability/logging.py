"""Structured logging configuration using structlog.

nearid only emits debug-level events from its codecs, and only once
structlog has been configured. A host application that never configures
structlog gets no output from this library. Call :func:`configure_logging`
at startup to turn the events on with nearid's defaults, or configure
structlog yourself.

Usage:
    from nearid.observability.logging import configure_logging, get_logger

    configure_logging()
    logger = get_logger(__name__)
    logger.debug("binary_decoded", type="ValidAccountId", strict=False)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog._config import BoundLoggerLazyProxy

Processor = structlog.types.Processor

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration settings from environment variables.

    Environment Variables:
        NEARID_LOG_LEVEL: Minimum level, case-insensitive (default: INFO)
        NEARID_LOG_FORMAT: ``console`` or ``json`` (default: console)

    Example:
        >>> LoggingSettings(level="debug").level
        'DEBUG'
    """

    model_config = SettingsConfigDict(
        env_prefix="NEARID_LOG_",
        extra="ignore",
    )

    level: LogLevel = Field(
        default="INFO",
        description="Minimum log level to output",
    )
    format: Literal["console", "json"] = Field(
        default="console",
        description="Renderer for log events",
    )

    @field_validator("level", "format", mode="before")
    @classmethod
    def normalize_case(cls, v: Any, info: ValidationInfo) -> Any:
        if not isinstance(v, str):
            return v
        return v.upper() if info.field_name == "level" else v.lower()

    @property
    def level_int(self) -> int:
        return logging.getLevelNamesMapping()[self.level]


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached LoggingSettings instance.

    Clear cache with ``get_logging_settings.cache_clear()`` for testing.
    """
    return LoggingSettings()


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog, which also enables nearid's codec events.

    Args:
        settings: Optional LoggingSettings instance. If not provided,
            settings are loaded from environment variables.
    """
    if settings is None:
        settings = get_logging_settings()

    renderer: Processor
    if settings.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.level_int),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger, bound to ``logger=name`` when a name is given.

    The returned proxy is assembled on first use, so module-level loggers
    pick up a configuration applied later by :func:`configure_logging`.
    """
    if name is None:
        return structlog.get_logger()
    # structlog.get_logger(logger=...) collides with wrap_logger's own
    # ``logger`` parameter, so build the same lazy proxy directly.
    return BoundLoggerLazyProxy(
        None, initial_values={"logger": name}, logger_factory_args=()
    )
