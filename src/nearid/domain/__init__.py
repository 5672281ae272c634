"""nearid domain -- pure Python account identifier primitives.

The syntax rule, the validated identifier type and the error hierarchy.
"""

from nearid.domain.account_id import AccountId, ValidAccountId
from nearid.domain.exceptions import (
    DomainError,
    ParseAccountIdError,
    ParseAccountIdErrorKind,
)
from nearid.domain.syntax import (
    MAX_ACCOUNT_ID_LEN,
    MIN_ACCOUNT_ID_LEN,
    is_valid_account_id,
)

__all__ = [
    "MAX_ACCOUNT_ID_LEN",
    "MIN_ACCOUNT_ID_LEN",
    "AccountId",
    "DomainError",
    "ParseAccountIdError",
    "ParseAccountIdErrorKind",
    "ValidAccountId",
    "is_valid_account_id",
]
