"""Domain exception hierarchy.

All errors raised by nearid derive from :class:`DomainError`, which carries
a machine-readable error code and structured context for logging.

Example:
    >>> from nearid.domain.exceptions import ParseAccountIdError
    >>> raise ParseAccountIdError()
    Traceback (most recent call last):
    ...
    nearid.domain.exceptions.ParseAccountIdError: the account ID is invalid
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

__all__ = [
    "DomainError",
    "ParseAccountIdError",
    "ParseAccountIdErrorKind",
]


class DomainError(Exception):
    """Base class for all domain errors.

    Attributes:
        error_code: Machine-readable error code for client handling.
        message: Human-readable error description.
        context: Structured debugging information.

    Example:
        >>> raise DomainError("Operation failed", context={"offset": 4})
        DomainError: Operation failed (offset=4)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ParseAccountIdErrorKind(StrEnum):
    """Reasons an account ID can fail to parse."""

    INVALID_ACCOUNT_ID = "invalid_account_id"


_KIND_MESSAGES: dict[ParseAccountIdErrorKind, str] = {
    ParseAccountIdErrorKind.INVALID_ACCOUNT_ID: "the account ID is invalid",
}


class ParseAccountIdError(DomainError, ValueError):
    """Raised when text fails the account ID syntax rule.

    The rejected text is not kept on the error. Callers that need it must
    hold on to their own input.

    Also a ``ValueError``, so it can be handled wherever string parsing
    failures are expected.

    Attributes:
        error_code: "INVALID_ACCOUNT_ID" (class constant).
        kind: Why parsing failed.

    Example:
        >>> str(ParseAccountIdError())
        'the account ID is invalid'
    """

    error_code: str = "INVALID_ACCOUNT_ID"

    def __init__(
        self,
        kind: ParseAccountIdErrorKind = ParseAccountIdErrorKind.INVALID_ACCOUNT_ID,
    ) -> None:
        self.kind = kind
        super().__init__(_KIND_MESSAGES[kind])
