"""Compact binary codec (Borsh layout).

Integers are little-endian and fixed width. Byte strings and text are
prefixed with their length as a ``u32``; text is UTF-8. Structures are the
concatenation of their fields in declaration order, written by types that
implement :class:`BinarySerializable`.

Usage:
    from nearid.codecs.binary import from_bytes, to_bytes

    data = to_bytes(ValidAccountId.parse("alice.near"))
    account = from_bytes(ValidAccountId, data)
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING, Any, Protocol, Self, TypeVar, runtime_checkable

import structlog

from nearid.codecs.settings import get_codec_settings
from nearid.domain.exceptions import DomainError
from nearid.observability.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Buffer

logger = get_logger(__name__)

_U8 = struct.Struct("<B")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")

_U128_MAX = (1 << 128) - 1

T = TypeVar("T", bound="BinarySerializable")


class BinaryDecodeError(DomainError):
    """Raised when a buffer does not hold the expected binary layout.

    Attributes:
        error_code: "BINARY_DECODE_ERROR" (class constant).
    """

    error_code: str = "BINARY_DECODE_ERROR"


@runtime_checkable
class BinarySerializable(Protocol):
    """A type that can be written to and read back from the binary codec."""

    def serialize_binary(self, writer: BinaryWriter) -> None: ...

    @classmethod
    def deserialize_binary(cls, reader: BinaryReader) -> Self: ...


class BinaryWriter:
    """Accumulates encoded values into a byte buffer."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_u8(self, value: int) -> None:
        self._pack(_U8, value)

    def write_u32(self, value: int) -> None:
        self._pack(_U32, value)

    def write_u64(self, value: int) -> None:
        self._pack(_U64, value)

    def write_u128(self, value: int) -> None:
        if not 0 <= value <= _U128_MAX:
            msg = f"u128 out of range: {value}"
            raise ValueError(msg)
        self._buffer += value.to_bytes(16, "little")

    def write_bool(self, value: bool) -> None:
        self.write_u8(1 if value else 0)

    def write_bytes(self, value: Buffer) -> None:
        data = bytes(value)
        self.write_u32(len(data))
        self._buffer += data

    def write_string(self, value: str) -> None:
        self.write_bytes(value.encode("utf-8"))

    def write(self, value: BinarySerializable) -> None:
        value.serialize_binary(self)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def _pack(self, fmt: struct.Struct, value: int) -> None:
        try:
            self._buffer += fmt.pack(value)
        except struct.error as exc:
            msg = f"Integer out of range for {fmt.size * 8}-bit field: {value}"
            raise ValueError(msg) from exc


class BinaryReader:
    """Reads encoded values from a byte buffer, front to back.

    Attributes:
        strict: When True, identifier types re-validate what they decode
            instead of trusting the buffer. Defaults to
            ``CodecSettings.strict_binary_decode``.
    """

    def __init__(self, data: Buffer, *, strict: bool | None = None) -> None:
        self._data = memoryview(bytes(data))
        self._offset = 0
        if strict is None:
            strict = get_codec_settings().strict_binary_decode
        self.strict = strict

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read_u8(self) -> int:
        return self._unpack(_U8)

    def read_u32(self) -> int:
        return self._unpack(_U32)

    def read_u64(self) -> int:
        return self._unpack(_U64)

    def read_u128(self) -> int:
        return int.from_bytes(self._take(16), "little")

    def read_bool(self) -> bool:
        offset = self._offset
        value = self.read_u8()
        if value not in (0, 1):
            msg = f"Invalid bool value: {value}"
            raise BinaryDecodeError(msg, context={"offset": offset})
        return value == 1

    def read_bytes(self) -> bytes:
        length = self.read_u32()
        return self._take(length)

    def read_string(self) -> str:
        offset = self._offset
        data = self.read_bytes()
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = "String is not valid UTF-8"
            raise BinaryDecodeError(msg, context={"offset": offset}) from exc

    def read(self, cls: type[T]) -> T:
        return cls.deserialize_binary(self)

    def finish(self) -> None:
        """Check that every byte of the buffer was consumed.

        Raises:
            BinaryDecodeError: If unread bytes remain.
        """
        if self.remaining:
            msg = "Not all bytes read"
            raise BinaryDecodeError(
                msg,
                context={"offset": self._offset, "remaining": self.remaining},
            )

    def _take(self, size: int) -> bytes:
        if size > self.remaining:
            msg = "Unexpected end of input"
            raise BinaryDecodeError(
                msg,
                context={
                    "offset": self._offset,
                    "needed": size,
                    "available": self.remaining,
                },
            )
        chunk = self._data[self._offset : self._offset + size].tobytes()
        self._offset += size
        return chunk

    def _unpack(self, fmt: struct.Struct) -> Any:
        (value,) = fmt.unpack(self._take(fmt.size))
        return value


def to_bytes(value: BinarySerializable) -> bytes:
    """Encode a value with the binary codec."""
    writer = BinaryWriter()
    writer.write(value)
    return writer.getvalue()


def from_bytes(cls: type[T], data: Buffer, *, strict: bool | None = None) -> T:
    """Decode a whole buffer into an instance of cls.

    Args:
        cls: Type to decode.
        data: Encoded bytes. Must hold exactly one value.
        strict: Re-validate identifiers while decoding. Defaults to
            ``CodecSettings.strict_binary_decode``.

    Raises:
        BinaryDecodeError: If the buffer is truncated, malformed, or has
            trailing bytes.
        ParseAccountIdError: In strict mode, if an account ID in the
            buffer is not valid.
    """
    reader = BinaryReader(data, strict=strict)
    value = reader.read(cls)
    reader.finish()
    if structlog.is_configured():
        logger.debug("binary_decoded", type=cls.__name__, strict=reader.strict)
    return value
