"""Account ID syntax rule.

An account ID is 2 to 64 bytes of lowercase ASCII letters and digits,
optionally split into parts by one of the separators ``-``, ``_`` or ``.``.
A separator may not open or close the ID, and two separators may not be
adjacent.

Example:
    >>> is_valid_account_id(b"alice.near")
    True
    >>> is_valid_account_id(b"Alice.near")
    False
"""

from __future__ import annotations

MIN_ACCOUNT_ID_LEN: int = 2
MAX_ACCOUNT_ID_LEN: int = 64

_SEPARATORS: frozenset[int] = frozenset(b"-_.")


def _is_part_char(byte: int) -> bool:
    return 0x61 <= byte <= 0x7A or 0x30 <= byte <= 0x39  # a-z, 0-9


def is_valid_account_id(account_id: bytes) -> bool:
    """Check raw account ID bytes against the account ID syntax rule.

    Args:
        account_id: UTF-8 encoded account ID.

    Returns:
        True if the bytes form a valid account ID, False otherwise.
    """
    if not MIN_ACCOUNT_ID_LEN <= len(account_id) <= MAX_ACCOUNT_ID_LEN:
        return False

    # A leading separator is rejected by treating the start as one.
    last_is_separator = True
    for byte in account_id:
        if byte in _SEPARATORS:
            if last_is_separator:
                return False
            last_is_separator = True
        elif _is_part_char(byte):
            last_is_separator = False
        else:
            return False

    return not last_is_separator
