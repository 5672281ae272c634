"""Codec configuration using Pydantic settings.

Settings are loaded from environment variables with the ``NEARID_CODEC_``
prefix.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CodecSettings(BaseSettings):
    """Configuration for the structured-text and binary codecs.

    Environment Variables:
        NEARID_CODEC_STRICT_BINARY_DECODE: Re-validate account IDs decoded
            from binary payloads (default: false, binary payloads are
            trusted)

    Example:
        >>> settings = CodecSettings()
        >>> settings.strict_binary_decode
        False
    """

    model_config = SettingsConfigDict(
        env_prefix="NEARID_CODEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict_binary_decode: bool = Field(
        default=False,
        description="Validate account IDs when decoding binary payloads",
    )


@lru_cache(maxsize=1)
def get_codec_settings() -> CodecSettings:
    """Get cached codec settings singleton.

    Clear with ``get_codec_settings.cache_clear()`` for testing.

    Returns:
        CodecSettings instance loaded from environment.
    """
    return CodecSettings()
