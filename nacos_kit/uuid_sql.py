"""Database value conversion for UUIDs, including a nullable wrapper."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from nacos_kit.uuidkit import NIL, SIZE, UUID, UUIDError, from_bytes, from_string

__all__ = ["NullUUID", "value", "scan"]


def value(u: UUID) -> str:
    """Return the database representation of a UUID."""
    return str(u)


def scan(src: Any) -> UUID:
    """Build a UUID from a database value.

    A 16-byte value is read as raw bytes; other bytes and strings as text.
    """
    if isinstance(src, (bytes, bytearray, memoryview)):
        raw = bytes(src)
        if len(raw) == SIZE:
            return from_bytes(raw)
        return from_string(raw)
    if isinstance(src, str):
        return from_string(src)
    raise UUIDError(f"uuid: cannot convert {type(src).__name__} to UUID")


@dataclass
class NullUUID:
    """A UUID that may be NULL in the database."""

    uuid: UUID = field(default_factory=lambda: NIL)
    valid: bool = False

    def value(self) -> str | None:
        """Return the database representation, or None when not valid."""
        if not self.valid:
            return None
        return value(self.uuid)

    def scan(self, src: Any) -> None:
        """Load from a database value; None marks the value as NULL."""
        if src is None:
            self.uuid, self.valid = NIL, False
            return
        self.valid = True
        self.uuid = scan(src)