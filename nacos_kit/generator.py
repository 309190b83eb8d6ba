"""RFC 4122 UUID generators for versions 1 to 5."""

from __future__ import annotations

import hashlib
import os
import struct
import threading
import time
import uuid as _stduuid
from typing import Any, Callable

from nacos_kit.uuidkit import UUID, UUIDError, Domain, Variant, Version

__all__ = [
    "EPOCH_START",
    "Generator",
    "default_hw_addr",
    "new_v1",
    "new_v2",
    "new_v3",
    "new_v4",
    "new_v5",
]

# 100-nanosecond intervals between the UUID epoch (1582-10-15) and the Unix epoch.
EPOCH_START = 122192928000000000

_MASK64 = (1 << 64) - 1


def _posix_uid() -> int:
    try:
        return os.getuid() & 0xFFFFFFFF
    except AttributeError:
        return 0xFFFFFFFF


def _posix_gid() -> int:
    try:
        return os.getgid() & 0xFFFFFFFF
    except AttributeError:
        return 0xFFFFFFFF


_POSIX_UID = _posix_uid()
_POSIX_GID = _posix_gid()


def default_hw_addr() -> bytes:
    """Return the 6-byte hardware address of this host.

    Raises UUIDError when no real hardware address can be found.
    """
    node = _stduuid.getnode()
    if (node >> 40) & 0x01:
        # The multicast bit marks a randomly generated node id.
        raise UUIDError("uuid: no HW address found")
    return node.to_bytes(6, "big")


class Generator:
    """Produces UUIDs from a clock, a hardware address source and a random source.

    ``epoch_func`` returns nanoseconds since the Unix epoch, ``hw_addr_func``
    returns at least six bytes or raises, and ``rand`` takes a byte count and
    returns up to that many random bytes.
    """

    def __init__(
        self,
        epoch_func: Callable[[], int] | None = None,
        hw_addr_func: Callable[[], bytes] | None = None,
        rand: Callable[[int], bytes] | None = None,
    ) -> None:
        self._epoch_func = epoch_func if epoch_func is not None else time.time_ns
        self._hw_addr_func = hw_addr_func if hw_addr_func is not None else default_hw_addr
        self._rand = rand if rand is not None else os.urandom

        self._lock = threading.Lock()
        self._clock_seq_lock = threading.Lock()
        self._hw_addr_lock = threading.Lock()
        self._clock_seq_done = False
        self._hw_addr_done = False
        self._last_time = 0
        self._clock_sequence = 0
        self._hardware_addr = bytes(6)

    def _read_full(self, size: int) -> bytes:
        buf = bytearray()
        while len(buf) < size:
            chunk = self._rand(size - len(buf))
            if not chunk:
                raise UUIDError("uuid: random source exhausted")
            buf += chunk
        return bytes(buf[:size])

    def _epoch(self) -> int:
        return (EPOCH_START + int(self._epoch_func()) // 100) & _MASK64

    def _get_clock_sequence(self) -> tuple[int, int]:
        with self._clock_seq_lock:
            if not self._clock_seq_done:
                self._clock_seq_done = True
                self._clock_sequence = struct.unpack(">H", self._read_full(2))[0]

        with self._lock:
            now = self._epoch()
            if now <= self._last_time:
                self._clock_sequence = (self._clock_sequence + 1) & 0xFFFF
            self._last_time = now
            return now, self._clock_sequence

    def _get_hardware_addr(self) -> bytes:
        with self._hw_addr_lock:
            if not self._hw_addr_done:
                self._hw_addr_done = True
                try:
                    addr = bytes(self._hw_addr_func())
                except Exception:
                    addr = None
                if addr is not None:
                    self._hardware_addr = (addr + bytes(6))[:6]
                else:
                    random_addr = bytearray(self._read_full(6))
                    random_addr[0] |= 0x01
                    self._hardware_addr = bytes(random_addr)
            return self._hardware_addr

    def new_v1(self) -> UUID:
        """Return a UUID built from the current time and the hardware address."""
        now, clock_seq = self._get_clock_sequence()
        head = struct.pack(
            ">IHHH",
            now & 0xFFFFFFFF,
            (now >> 32) & 0xFFFF,
            (now >> 48) & 0xFFFF,
            clock_seq,
        )
        node = self._get_hardware_addr()
        return UUID(head + node).with_version(Version.V1).with_variant(Variant.RFC4122)

    def new_v2(self, domain: int) -> UUID:
        """Return a DCE security UUID based on the POSIX UID or GID."""
        data = bytearray(bytes(self.new_v1()))
        if domain == Domain.PERSON:
            data[0:4] = struct.pack(">I", _POSIX_UID)
        elif domain == Domain.GROUP:
            data[0:4] = struct.pack(">I", _POSIX_GID)
        data[9] = int(domain) & 0xFF
        return UUID(bytes(data)).with_version(Version.V2).with_variant(Variant.RFC4122)

    def new_v3(self, ns: UUID, name: str) -> UUID:
        """Return a UUID from the MD5 hash of a namespace UUID and a name."""
        return _from_hash(hashlib.md5(), ns, name).with_version(Version.V3).with_variant(
            Variant.RFC4122
        )

    def new_v4(self) -> UUID:
        """Return a randomly generated UUID."""
        return UUID(self._read_full(16)).with_version(Version.V4).with_variant(
            Variant.RFC4122
        )

    def new_v5(self, ns: UUID, name: str) -> UUID:
        """Return a UUID from the SHA-1 hash of a namespace UUID and a name."""
        return _from_hash(hashlib.sha1(), ns, name).with_version(Version.V5).with_variant(
            Variant.RFC4122
        )


def _from_hash(hasher: Any, ns: UUID, name: str) -> UUID:
    hasher.update(bytes(ns))
    hasher.update(name.encode("utf-8"))
    return UUID(hasher.digest()[:16])


_GLOBAL = Generator()


def new_v1() -> UUID:
    """Return a time and hardware address based UUID."""
    return _GLOBAL.new_v1()


def new_v2(domain: int) -> UUID:
    """Return a DCE security UUID."""
    return _GLOBAL.new_v2(domain)


def new_v3(ns: UUID, name: str) -> UUID:
    """Return an MD5 name-based UUID."""
    return _GLOBAL.new_v3(ns, name)


def new_v4() -> UUID:
    """Return a random UUID."""
    return _GLOBAL.new_v4()


def new_v5(ns: UUID, name: str) -> UUID:
    """Return a SHA-1 name-based UUID."""
    return _GLOBAL.new_v5(ns, name)