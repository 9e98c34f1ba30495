from __future__ import annotations

import hashlib

from ._request import IconRequest
from ._url import DEFAULT_BASE_URL, build_icon_url

DIGEST_SIZE = 8
"""Digest length in bytes. Keys are twice as long once hex-encoded."""


def digest_url(url: str) -> str:
    """Cache key for a canonical icon URL: 8 bytes of SHAKE-256 output,
    hex-encoded."""
    return hashlib.shake_256(url.encode("utf-8")).hexdigest(DIGEST_SIZE)


def request_digest(request: IconRequest, base_url: str = DEFAULT_BASE_URL) -> str:
    return digest_url(build_icon_url(request, base_url))
