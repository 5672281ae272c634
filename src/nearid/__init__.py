"""nearid -- validated NEAR account identifiers.

``ValidAccountId`` can only be built from text that passes the account ID
syntax rule, and round-trips through JSON (pydantic) and a Borsh-style
binary codec.

Example:
    >>> from nearid import ValidAccountId, from_json, to_json
    >>> to_json(ValidAccountId.parse("alice.near"))
    '"alice.near"'
"""

from nearid.codecs import (
    BinaryDecodeError,
    BinaryReader,
    BinaryWriter,
    from_bytes,
    from_json,
    to_bytes,
    to_json,
)
from nearid.domain import (
    AccountId,
    DomainError,
    ParseAccountIdError,
    ValidAccountId,
    is_valid_account_id,
)

__version__ = "0.1.0"

__all__ = [
    "AccountId",
    "BinaryDecodeError",
    "BinaryReader",
    "BinaryWriter",
    "DomainError",
    "ParseAccountIdError",
    "ValidAccountId",
    "from_bytes",
    "from_json",
    "is_valid_account_id",
    "to_bytes",
    "to_json",
]
