"""nearid codecs -- JSON and binary encoding for account identifiers."""

from nearid.codecs.binary import (
    BinaryDecodeError,
    BinaryReader,
    BinarySerializable,
    BinaryWriter,
    from_bytes,
    to_bytes,
)
from nearid.codecs.json import from_json, to_json
from nearid.codecs.settings import CodecSettings, get_codec_settings

__all__ = [
    "BinaryDecodeError",
    "BinaryReader",
    "BinarySerializable",
    "BinaryWriter",
    "CodecSettings",
    "from_bytes",
    "from_json",
    "get_codec_settings",
    "to_bytes",
    "to_json",
]
