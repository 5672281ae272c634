"""Validated account identifier.

``ValidAccountId`` wraps a raw :data:`AccountId` and guarantees that the
wrapped text passed :func:`~nearid.domain.syntax.is_valid_account_id`.
Every text-based way of building one goes through ``_validate_account_id``.

The binary decode path is the one exception: it rebuilds the identifier
from bytes without re-checking the syntax, on the assumption that binary
payloads were produced from already validated identifiers. Set
``NEARID_CODEC_STRICT_BINARY_DECODE=true`` to validate there too.

Example:
    >>> from nearid.domain.account_id import ValidAccountId
    >>> account = ValidAccountId.parse("bob.near")
    >>> str(account)
    'bob.near'
    >>> account.into_raw()
    'bob.near'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic_core import PydanticCustomError, core_schema

from nearid.domain.exceptions import ParseAccountIdError, ParseAccountIdErrorKind
from nearid.domain.syntax import is_valid_account_id

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

    from nearid.codecs.binary import BinaryReader, BinaryWriter

AccountId = str
"""Raw, unvalidated account identifier."""


def _validate_account_id(value: str) -> None:
    if not isinstance(value, str):
        msg = f"Account ID must be a str, got {type(value).__name__}"
        raise TypeError(msg)
    # surrogatepass turns lone surrogates into bytes the syntax rule rejects.
    if not is_valid_account_id(value.encode("utf-8", "surrogatepass")):
        raise ParseAccountIdError(ParseAccountIdErrorKind.INVALID_ACCOUNT_ID)


@dataclass(frozen=True, slots=True, order=True)
class ValidAccountId:
    """Account identifier that passed syntax validation.

    Instances compare and sort by their text, and hash like it, so they
    work as keys in dicts and ordered containers.

    Attributes:
        value: The validated account ID text.

    Raises:
        ParseAccountIdError: If value is not a valid account ID.

    Example:
        >>> ValidAccountId("alice.near")
        ValidAccountId(value='alice.near')
        >>> ValidAccountId("alice.near") < ValidAccountId("bob.near")
        True
    """

    value: AccountId

    def __post_init__(self) -> None:
        _validate_account_id(self.value)

    @classmethod
    def parse(cls, text: str) -> ValidAccountId:
        """Parse text into a validated account ID.

        Raises:
            ParseAccountIdError: If text is not a valid account ID.
        """
        return cls(text)

    @classmethod
    def try_from(cls, value: AccountId) -> ValidAccountId:
        """Convert a raw account ID, keeping the given string object."""
        return cls.parse(value)

    @classmethod
    def _unchecked(cls, value: AccountId) -> ValidAccountId:
        # Only for payloads decoded from trusted binary sources.
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", value)
        return instance

    def __str__(self) -> str:
        return self.value

    def to_string(self) -> str:
        return self.value

    def as_ref(self) -> AccountId:
        """Return the wrapped text for APIs that take a raw account ID."""
        return self.value

    def into_raw(self) -> AccountId:
        """Return the wrapped text once the validated type is no longer needed."""
        return self.value

    # -- Structured text (pydantic) ------------------------------------------

    @classmethod
    def _from_decoded(cls, value: str) -> ValidAccountId:
        try:
            return cls.try_from(value)
        except ParseAccountIdError as exc:
            raise PydanticCustomError("account_id_invalid", str(exc)) from exc

    @classmethod
    def _from_python(
        cls,
        value: Any,
        handler: core_schema.ValidatorFunctionWrapHandler,
    ) -> ValidAccountId:
        if isinstance(value, cls):
            return value
        return handler(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        """Decode from a string scalar and encode back to the same string.

        A non-string input fails inside pydantic's own string validation.
        A string that fails the syntax rule is reported as an
        ``account_id_invalid`` error carrying the parse error message.
        Python input that is already a ``ValidAccountId`` is kept as is.
        """
        from_str = core_schema.no_info_after_validator_function(
            cls._from_decoded,
            core_schema.str_schema(),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.no_info_wrap_validator_function(
                cls._from_python,
                from_str,
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.into_raw,
                return_schema=core_schema.str_schema(),
            ),
        )

    # -- Binary --------------------------------------------------------------

    def serialize_binary(self, writer: BinaryWriter) -> None:
        """Write the account ID exactly as its raw string would be written."""
        writer.write_string(self.value)

    @classmethod
    def deserialize_binary(cls, reader: BinaryReader) -> ValidAccountId:
        """Read an account ID written by :meth:`serialize_binary`.

        Skips the syntax check unless the reader was created in strict mode.

        Raises:
            BinaryDecodeError: If the buffer does not hold a UTF-8 string.
            ParseAccountIdError: In strict mode, if the string is not a
                valid account ID.
        """
        value = reader.read_string()
        if reader.strict:
            return cls.try_from(value)
        return cls._unchecked(value)
