from __future__ import annotations

from urllib.parse import quote, urlencode, urlsplit

from ._errors import UrlConstructionError
from ._request import IconRequest

DEFAULT_BASE_URL = "https://api.iconify.design"


def is_safe_segment(segment: str) -> bool:
    """Check that a pack or icon name can be used as exactly one path segment,
    both in a URL and on disk."""
    if segment in ("", ".", ".."):
        return False
    if "/" in segment or "\\" in segment:
        return False
    return all(ch.isprintable() for ch in segment)


def query_pairs(request: IconRequest) -> list[tuple[str, str]]:
    """Query parameters for a request. The order is fixed, since cache keys are
    derived from the full URL string."""
    pairs: list[tuple[str, str]] = []
    if request.color is not None:
        pairs.append(("color", request.color))
    if request.width is not None:
        pairs.append(("width", request.width))
    if request.height is not None:
        pairs.append(("height", request.height))
    if request.flip is not None:
        pairs.append(("flip", request.flip.value))
    if request.rotate is not None:
        pairs.append(("rotate", request.rotate.value))
    if request.view_box:
        pairs.append(("box", "true"))
    return pairs


def build_icon_url(request: IconRequest, base_url: str = DEFAULT_BASE_URL) -> str:
    """Build the canonical Iconify API URL for a request.

    The result has the form `<base>/<pack>/<name>.svg?<query>`. The `?` is
    kept even when there are no query parameters, so that URLs (and therefore
    cache keys) match those of existing caches.
    """
    parts = urlsplit(base_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise UrlConstructionError(
            f"base url must be an absolute http(s) url, got {base_url!r}"
        )
    if parts.query or parts.fragment:
        raise UrlConstructionError(
            f"base url must not have a query or fragment, got {base_url!r}"
        )

    for segment in (request.pack, request.name):
        if not is_safe_segment(segment):
            raise UrlConstructionError(
                f"{segment!r} can't be used as a url path segment"
            )

    path = "/".join(
        (
            base_url.rstrip("/"),
            quote(request.pack, safe=""),
            quote(f"{request.name}.svg", safe=""),
        )
    )
    return f"{path}?{urlencode(query_pairs(request))}"
