"""Shared fixtures for nearid tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from nearid.codecs.settings import get_codec_settings
from nearid.domain.account_id import ValidAccountId
from nearid.observability.logging import get_logging_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Reload settings from the environment in every test."""
    get_codec_settings.cache_clear()
    get_logging_settings.cache_clear()
    yield
    get_codec_settings.cache_clear()
    get_logging_settings.cache_clear()


@pytest.fixture(autouse=True)
def _unconfigured_structlog() -> Iterator[None]:
    """Start every test with structlog unconfigured, as a host app would."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture()
def alice() -> ValidAccountId:
    """A valid account ID for alice.near."""
    return ValidAccountId.parse("alice.near")
