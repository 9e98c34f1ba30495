"""Exception types raised while parsing and resolving icon references."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class IconifyError(Exception):
    """Base class for all errors raised by `iconify_svg`."""


class MalformedReferenceError(IconifyError, ValueError):
    """Reference is not of the form `pack_name:icon_name`."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(f"expected `pack_name:icon_name`, got {reference!r}")


class InvalidOptionError(IconifyError, ValueError):
    def __init__(self, field: str, value: Any, hint: str | None = None) -> None:
        self.field = field
        self.value = value
        message = f"Invalid {field} value: {value!r}."
        if hint is not None:
            message += f" {hint}"
        super().__init__(message)


class UnknownOptionError(IconifyError, TypeError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Unknown option {name!r}. Expected one of: color, width, height,"
            " flip, rotate, view_box."
        )


class UrlConstructionError(IconifyError, ValueError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"couldn't build icon url: {reason}")


class FetchFailedError(IconifyError):
    """Transport-level failure: connection error, timeout, or non-2xx status."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"failed to fetch icon: {reason}")


class IconNotFoundError(IconifyError, LookupError):
    """The remote service answered with its `"404"` body for this icon."""

    def __init__(self, pack: str, name: str, url: str) -> None:
        self.pack = pack
        self.name = name
        self.url = url
        super().__init__(f"icon not found: {url}")


class OfflineAssetMissingError(IconifyError, LookupError):
    def __init__(self, pack: str, name: str, path: Path) -> None:
        self.pack = pack
        self.name = name
        self.path = path
        super().__init__(
            f"failed to read offline icon {pack}:{name} at {path}.\n"
            "usually this means you need to prepare icons first with"
            " ICONIFY_PREPARE=true."
        )


class StoreIOError(IconifyError):
    """Filesystem failure while reading or writing a store entry."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
