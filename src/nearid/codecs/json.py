"""Structured-text (JSON) codec for account identifiers.

``ValidAccountId`` carries its own pydantic core schema, so it can be used
directly as a field type on any ``BaseModel``. The helpers here cover the
standalone case of a single identifier.

Usage:
    from nearid.codecs.json import from_json, to_json

    account = from_json('"alice.near"')
    to_json(account)  # '"alice.near"'
"""

from __future__ import annotations

import structlog
from pydantic import TypeAdapter, ValidationError

from nearid.domain.account_id import ValidAccountId
from nearid.observability.logging import get_logger

logger = get_logger(__name__)

_ADAPTER: TypeAdapter[ValidAccountId] = TypeAdapter(ValidAccountId)


def to_json(value: ValidAccountId) -> str:
    """Serialize an account ID as a JSON string scalar."""
    return _ADAPTER.dump_json(value).decode("utf-8")


def from_json(data: str | bytes) -> ValidAccountId:
    """Deserialize an account ID from a JSON string scalar.

    Args:
        data: JSON document holding a single string.

    Returns:
        The validated account ID.

    Raises:
        pydantic.ValidationError: If data is not a JSON string
            (``json_invalid``, ``string_type``), or the string is not a valid
            account ID (``account_id_invalid``).
    """
    try:
        return _ADAPTER.validate_json(data)
    except ValidationError as exc:
        if structlog.is_configured():
            logger.debug(
                "account_id_rejected",
                source="json",
                error_types=[error["type"] for error in exc.errors()],
            )
        raise
