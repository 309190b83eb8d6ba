"""UUID value type with version/variant handling and text/binary codecs."""

from __future__ import annotations

import enum
import re

__all__ = [
    "SIZE",
    "UUIDError",
    "Version",
    "Variant",
    "Domain",
    "UUID",
    "NIL",
    "NAMESPACE_DNS",
    "NAMESPACE_URL",
    "NAMESPACE_OID",
    "NAMESPACE_X500",
    "from_bytes",
    "from_bytes_or_nil",
    "from_string",
    "from_string_or_nil",
    "equal",
]

SIZE = 16

_URN_PREFIX = b"urn:uuid:"
_BYTE_GROUPS = (8, 4, 4, 4, 12)
_DASH_POSITIONS = (8, 13, 18, 23)
_HEX_RE = re.compile(rb"[0-9a-fA-F]*")


class UUIDError(ValueError):
    """Raised when a UUID cannot be built from the given input."""


class Version(enum.IntEnum):
    """UUID generation algorithm versions."""

    V1 = 1
    V2 = 2
    V3 = 3
    V4 = 4
    V5 = 5


class Variant(enum.IntEnum):
    """UUID layout variants."""

    NCS = 0
    RFC4122 = 1
    MICROSOFT = 2
    FUTURE = 3


class Domain(enum.IntEnum):
    """DCE security domains."""

    PERSON = 0
    GROUP = 1
    ORG = 2


class UUID:
    """An immutable 16-byte universally unique identifier."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes | bytearray = bytes(SIZE)) -> None:
        raw = bytes(data)
        if len(raw) != SIZE:
            raise UUIDError(
                f"uuid: UUID must be exactly {SIZE} bytes long, got {len(raw)} bytes"
            )
        self._data = raw

    def version(self) -> int:
        """Return the algorithm version stored in the UUID."""
        return self._data[6] >> 4

    def variant(self) -> Variant:
        """Return the layout variant of the UUID."""
        b = self._data[8]
        if b >> 7 == 0x00:
            return Variant.NCS
        if b >> 6 == 0x02:
            return Variant.RFC4122
        if b >> 5 == 0x06:
            return Variant.MICROSOFT
        return Variant.FUTURE

    def with_version(self, version: int) -> UUID:
        """Return a copy with the version bits set."""
        data = bytearray(self._data)
        data[6] = (data[6] & 0x0F) | ((int(version) << 4) & 0xFF)
        return UUID(data)

    def with_variant(self, variant: int) -> UUID:
        """Return a copy with the variant bits set."""
        data = bytearray(self._data)
        b = data[8]
        if variant == Variant.NCS:
            data[8] = b & 0x7F
        elif variant == Variant.RFC4122:
            data[8] = (b & 0x3F) | 0x80
        elif variant == Variant.MICROSOFT:
            data[8] = (b & 0x1F) | 0xC0
        else:
            data[8] = (b & 0x1F) | 0xE0
        return UUID(data)

    def __bytes__(self) -> bytes:
        return self._data

    def __str__(self) -> str:
        h = self._data.hex()
        return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:]}"

    def __repr__(self) -> str:
        return f"UUID('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def marshal_text(self) -> bytes:
        """Return the canonical text form as bytes."""
        return str(self).encode("ascii")

    def marshal_binary(self) -> bytes:
        """Return the raw 16 bytes."""
        return self._data


def _decode_hex(text: bytes) -> bytes:
    if not _HEX_RE.fullmatch(text) or len(text) % 2:
        raise UUIDError(f"uuid: invalid hex in {text!r}")
    return bytes.fromhex(text.decode("ascii"))


def _decode_hash_like(text: bytes) -> bytes:
    return _decode_hex(text)


def _decode_canonical(text: bytes) -> bytes:
    if any(text[pos] != ord("-") for pos in _DASH_POSITIONS):
        raise UUIDError(f"uuid: incorrect UUID format {text!r}")
    parts = text.split(b"-")
    if tuple(len(p) for p in parts) != _BYTE_GROUPS:
        raise UUIDError(f"uuid: incorrect UUID format {text!r}")
    return b"".join(_decode_hex(p) for p in parts)


def _decode_plain(text: bytes) -> bytes:
    if len(text) == 32:
        return _decode_hash_like(text)
    if len(text) == 36:
        return _decode_canonical(text)
    raise UUIDError(f"uuid: incorrect UUID length: {text!r}")


def _decode_braced(text: bytes) -> bytes:
    if not (text.startswith(b"{") and text.endswith(b"}")):
        raise UUIDError(f"uuid: incorrect UUID format {text!r}")
    return _decode_plain(text[1:-1])


def _decode_urn(text: bytes) -> bytes:
    if text[:9] != _URN_PREFIX:
        raise UUIDError(f"uuid: incorrect UUID format: {text!r}")
    return _decode_plain(text[9:])


def from_bytes(data: bytes | bytearray) -> UUID:
    """Build a UUID from exactly 16 raw bytes."""
    return UUID(data)


def from_bytes_or_nil(data: bytes | bytearray) -> UUID:
    """Like from_bytes, but return NIL on error."""
    try:
        return from_bytes(data)
    except UUIDError:
        return NIL


def from_string(text: str | bytes) -> UUID:
    """Parse canonical, hash-like, braced or URN text into a UUID."""
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    length = len(raw)
    if length == 32:
        data = _decode_hash_like(raw)
    elif length == 36:
        data = _decode_canonical(raw)
    elif length == 38:
        data = _decode_braced(raw)
    elif length in (41, 45):
        data = _decode_urn(raw)
    else:
        raise UUIDError(f"uuid: incorrect UUID length: {raw!r}")
    return UUID(data)


def from_string_or_nil(text: str | bytes) -> UUID:
    """Like from_string, but return NIL on error."""
    try:
        return from_string(text)
    except UUIDError:
        return NIL


def equal(u1: UUID, u2: UUID) -> bool:
    """Return True if both UUIDs hold the same bytes."""
    return bytes(u1) == bytes(u2)


NIL = UUID(bytes(SIZE))
NAMESPACE_DNS = from_string("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_URL = from_string("6ba7b811-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_OID = from_string("6ba7b812-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_X500 = from_string("6ba7b814-9dad-11d1-80b4-00c04fd430c8")