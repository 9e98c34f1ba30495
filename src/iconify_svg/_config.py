from __future__ import annotations

import dataclasses
import enum
import os
from pathlib import Path
from typing import Mapping, Optional

import platformdirs

from ._url import DEFAULT_BASE_URL

CACHE_NAMESPACE = "iconify-svg"
"""Subdirectory of the platform cache directory that holds our entries."""

OFFLINE_SUBDIR = "icons"


class ResolverMode(enum.Enum):
    LIVE = "live"
    """Fetch from the network, reading and writing the local cache."""
    OFFLINE_SERVE = "offline-serve"
    """Read only from the offline icon directory. Never touches the network."""
    OFFLINE_PREPARE = "offline-prepare"
    """Fetch like `LIVE`, and also write every icon to the offline directory."""


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() == "true"


@dataclasses.dataclass(frozen=True)
class IconifyConfig:
    """Configuration for icon resolution. Build this once, typically with
    :meth:`from_env`, and pass it to :class:`IconResolver`."""

    base_url: str = DEFAULT_BASE_URL
    """Root of the Iconify API."""
    mode: ResolverMode = ResolverMode.LIVE
    cache_enabled: bool = True
    """Whether to read and write the local cache. Ignored in `OFFLINE_SERVE`
    mode, which only ever reads the offline directory."""
    cache_dir: Optional[Path] = None
    """Local cache root. If None, we use the platform's user cache directory."""
    offline_dir: Optional[Path] = None
    """Offline icon root. If None, we use `<project_root>/icons`."""
    project_root: Optional[Path] = None
    """Root used to locate the default offline directory. If None, we use the
    current working directory."""
    timeout: float = 30.0
    """Network timeout, in seconds."""
    strict_cache_writes: bool = True
    """If False, failing to write the local cache emits a warning instead of
    failing the resolution. Writes to the offline directory are always strict."""

    @staticmethod
    def from_env(
        environ: Optional[Mapping[str, str]] = None,
        offline: Optional[bool] = None,
        **overrides,
    ) -> IconifyConfig:
        """Read configuration from environment variables.

        Recognized variables:
            ICONIFY_URL: Overrides the API base URL.
            ICONIFY_CACHE_DIR: Overrides the local cache directory.
            ICONIFY_OFFLINE_DIR: Overrides the offline icon directory.
            ICONIFY_OFFLINE: `true` to enable offline mode.
            ICONIFY_PREPARE: `true` to prepare offline icons instead of
                reading them. Only has an effect when offline mode is enabled.
            ICONIFY_NO_CACHE: `true` to disable the local cache.

        Args:
            environ: Mapping to read from. Defaults to `os.environ`.
            offline: Enable offline mode regardless of `ICONIFY_OFFLINE`.
            **overrides: Any `IconifyConfig` field, applied last.
        """
        if environ is None:
            environ = os.environ

        if offline is None:
            offline = _env_flag(environ, "ICONIFY_OFFLINE")
        if not offline:
            mode = ResolverMode.LIVE
        elif _env_flag(environ, "ICONIFY_PREPARE"):
            mode = ResolverMode.OFFLINE_PREPARE
        else:
            mode = ResolverMode.OFFLINE_SERVE

        cache_dir = environ.get("ICONIFY_CACHE_DIR")
        offline_dir = environ.get("ICONIFY_OFFLINE_DIR")
        config = IconifyConfig(
            base_url=environ.get("ICONIFY_URL") or DEFAULT_BASE_URL,
            mode=mode,
            cache_enabled=not _env_flag(environ, "ICONIFY_NO_CACHE"),
            cache_dir=Path(cache_dir) if cache_dir else None,
            offline_dir=Path(offline_dir) if offline_dir else None,
        )
        return dataclasses.replace(config, **overrides) if overrides else config

    def cache_root(self) -> Path:
        if self.cache_dir is not None:
            return Path(self.cache_dir)
        return platformdirs.user_cache_path(CACHE_NAMESPACE, appauthor=False)

    def offline_root(self) -> Path:
        if self.offline_dir is not None:
            return Path(self.offline_dir)
        root = self.project_root if self.project_root is not None else Path.cwd()
        return Path(root) / OFFLINE_SUBDIR

    @property
    def uses_cache(self) -> bool:
        return self.cache_enabled and self.mode is not ResolverMode.OFFLINE_SERVE
