"""Text helpers: content truncation for logs and MD5 digests."""

from __future__ import annotations

import hashlib

__all__ = ["SHOW_CONTENT_SIZE", "truncate_content", "md5"]

SHOW_CONTENT_SIZE = 100


def truncate_content(content: str) -> str:
    """Return at most the first SHOW_CONTENT_SIZE UTF-8 bytes of the content."""
    if not content:
        return ""
    raw = content.encode("utf-8")
    if len(raw) <= SHOW_CONTENT_SIZE:
        return content
    return raw[:SHOW_CONTENT_SIZE].decode("utf-8", errors="ignore")


def md5(content: str) -> str:
    """Return the lowercase hex MD5 digest of the UTF-8 content."""
    return hashlib.md5(content.encode("utf-8")).hexdigest()