from __future__ import annotations

import warnings
from pathlib import Path
from typing import Any, Optional

import rich

from ._config import IconifyConfig, ResolverMode
from ._digest import digest_url
from ._errors import IconNotFoundError, OfflineAssetMissingError, StoreIOError
from ._request import IconRequest
from ._store import DirectoryStore, IconStore, entry_relpath
from ._transport import RequestsTransport, Transport
from ._url import build_icon_url

NOT_FOUND_BODY = "404"
"""The Iconify API answers missing icons with status 200 and this body."""


class IconResolver:
    """Resolve icon requests to SVG text.

    Each call to :meth:`resolve` is independent: the only state shared between
    calls is what has been persisted to the stores.

    Args:
        config: Resolver configuration. Defaults to `IconifyConfig()`: live
            mode, with the platform cache directory.
        transport: Used for network fetches. Defaults to a
            :class:`RequestsTransport` with the configured timeout.
        cache: Local cache. Defaults to a :class:`DirectoryStore` at
            `config.cache_root()` when caching is enabled.
        offline_store: Offline icon store. Defaults to a
            :class:`DirectoryStore` at `config.offline_root()` in the offline
            modes.
        verbose: Print a line for each cache hit, fetch, and offline write.
    """

    def __init__(
        self,
        config: Optional[IconifyConfig] = None,
        transport: Optional[Transport] = None,
        cache: Optional[IconStore] = None,
        offline_store: Optional[IconStore] = None,
        verbose: bool = False,
    ) -> None:
        self.config = config if config is not None else IconifyConfig()
        self.transport: Transport = (
            transport
            if transport is not None
            else RequestsTransport(timeout=self.config.timeout)
        )

        # The offline directory is the only source of icons when serving.
        self.cache: Optional[IconStore] = None
        if self.config.uses_cache:
            self.cache = (
                cache if cache is not None else DirectoryStore(self.config.cache_root())
            )

        self.offline_store: Optional[IconStore] = None
        if self.config.mode is not ResolverMode.LIVE:
            self.offline_store = (
                offline_store
                if offline_store is not None
                else DirectoryStore(self.config.offline_root())
            )
        self.verbose = verbose

    @property
    def mode(self) -> ResolverMode:
        return self.config.mode

    def _log(self, message: str) -> None:
        if self.verbose:
            rich.print(f"[bold](iconify)[/bold] {message}")

    def icon_url(self, request: IconRequest) -> str:
        return build_icon_url(request, self.config.base_url)

    def cache_key(self, request: IconRequest) -> str:
        return digest_url(self.icon_url(request))

    def resolve(self, request: IconRequest) -> str:
        """Resolve a request to SVG markup.

        Raises:
            UrlConstructionError: The request can't be turned into a URL.
            OfflineAssetMissingError: Serving offline, and the icon hasn't been
                prepared.
            FetchFailedError: The network request failed.
            IconNotFoundError: The API doesn't know this icon.
            StoreIOError: Reading or writing a store failed.
        """
        url = self.icon_url(request)
        key = digest_url(url)
        pack, name = request.pack, request.name

        if self.cache is not None:
            text = self.cache.lookup(pack, name, key)
            if text is not None:
                self._log(f"Cache hit for {request.reference} ({key}).")
                self._prepare_offline(request, key, text)
                return text

        if self.mode is ResolverMode.OFFLINE_SERVE:
            assert self.offline_store is not None
            text = self.offline_store.lookup(pack, name, key)
            if text is None:
                raise OfflineAssetMissingError(
                    pack, name, self._offline_path(pack, name, key)
                )
            return text

        self._log(f"Fetching {url}")
        text = self.transport.fetch(url)
        if text == NOT_FOUND_BODY:
            raise IconNotFoundError(pack, name, url)

        if self.cache is not None:
            try:
                self.cache.store(pack, name, key, text)
            except StoreIOError as e:
                if self.config.strict_cache_writes:
                    raise
                warnings.warn(
                    f"[iconify] Failed to cache {request.reference}: {e}",
                    stacklevel=2,
                )

        self._prepare_offline(request, key, text)
        return text

    def resolve_reference(self, reference: str, **options: Any) -> str:
        """Parse a `pack:name` reference with options, then resolve it."""
        return self.resolve(IconRequest.parse(reference, **options))

    def _prepare_offline(self, request: IconRequest, key: str, text: str) -> None:
        if self.mode is not ResolverMode.OFFLINE_PREPARE:
            return
        assert self.offline_store is not None
        self.offline_store.store(request.pack, request.name, key, text)
        self._log(f"Prepared {request.reference} for offline use.")

    def _offline_path(self, pack: str, name: str, key: str) -> Path:
        if isinstance(self.offline_store, DirectoryStore):
            return self.offline_store.path_for(pack, name, key)
        return entry_relpath(pack, name, key)
