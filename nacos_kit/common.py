"""General helpers: time, JSON, cache keys, local address and URL encoding."""

from __future__ import annotations

import ipaddress
import json
import logging
import re
import socket
import time
from dataclasses import fields, is_dataclass
from datetime import timedelta
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from nacos_kit.model import Service

__all__ = [
    "current_millis",
    "json_to_service",
    "to_json_string",
    "local_ip",
    "get_duration_with_default",
    "get_url_formed_map",
    "get_status_code",
    "deep_copy_map",
]

_log = logging.getLogger(__name__)

_INT64_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_local_ip_cache: dict[str, str] = {}


def current_millis() -> int:
    """Return the current time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def json_to_service(result: str) -> Optional[Service]:
    """Decode a service from JSON text; return None if it cannot be decoded."""
    try:
        data = json.loads(result)
        if data is None:
            service = Service()
        elif isinstance(data, dict):
            service = Service.from_dict(data)
        else:
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    except (ValueError, TypeError, AttributeError) as err:
        _log.error("failed to unmarshal json string:%s err:%r", result, err)
        return None
    if not service.hosts:
        _log.warning("instance list is empty,json string:%s", result)
    return service


def _json_default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.metadata.get("json", f.name): getattr(obj, f.name)
            for f in fields(obj)
        }
    raise TypeError(f"cannot encode {type(obj).__name__} as JSON")


def to_json_string(obj: Any) -> str:
    """Encode an object as compact JSON; return an empty string on failure."""
    try:
        return json.dumps(
            obj, default=_json_default, separators=(",", ":"), ensure_ascii=False
        )
    except (TypeError, ValueError):
        return ""


def _discover_local_ip() -> str:
    candidates: list[str] = []
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            # Connecting a datagram socket sends nothing; it only picks a route.
            sock.connect(("192.0.2.1", 1))
            candidates.append(sock.getsockname()[0])
    except OSError:
        pass
    try:
        candidates.extend(socket.gethostbyname_ex(socket.gethostname())[2])
    except OSError as err:
        _log.error("get InterfaceAddress failed,err:%r", err)
    for candidate in candidates:
        try:
            addr = ipaddress.ip_address(candidate)
        except ValueError:
            continue
        if addr.version == 4 and not addr.is_loopback and not addr.is_unspecified:
            return candidate
    return ""


def local_ip() -> str:
    """Return a non-loopback IPv4 address of this host, or an empty string."""
    cached = _local_ip_cache.get("ip")
    if cached:
        return cached
    found = _discover_local_ip()
    if found:
        _local_ip_cache["ip"] = found
        _log.info("Local IP:%s", found)
    return found


def get_duration_with_default(
    metadata: Mapping[str, str], key: str, default: timedelta
) -> timedelta:
    """Read a duration in nanoseconds from metadata, falling back to a default."""
    if key not in metadata:
        return default
    data = metadata[key]
    if not isinstance(data, str) or not _INT64_RE.fullmatch(data):
        _log.error("key:%s is not a number", key)
        return default
    nanos = int(data)
    if not _INT64_MIN <= nanos <= _INT64_MAX:
        _log.error("key:%s is not a number", key)
        return default
    return timedelta(microseconds=nanos / 1000)


def get_url_formed_map(source: Mapping[str, str]) -> str:
    """URL-encode a mapping as a query string, sorted by key."""
    return urlencode(sorted(source.items()))


def get_status_code(response: Any) -> str:
    """Return the status code of a response as text, or "NA" when there is none."""
    if response is None:
        return "NA"
    code = getattr(response, "status_code", None)
    if code is None:
        code = getattr(response, "status")
    return str(int(code))


def deep_copy_map(params: Optional[Mapping[str, str]]) -> dict[str, str]:
    """Return an independent copy of a string mapping."""
    return dict(params or {})