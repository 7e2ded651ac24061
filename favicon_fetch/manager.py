"""
Favicon retrieval.

FaviconManager looks a site's favicon up in the vault first and falls back to
the remote lookup service on a miss, storing what it fetched for next time.
Vault and network failures degrade to the next best result; callers get a
PNG data URI or None, and only malformed input raises.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

from .cache import Clock, FaviconCache
from .config.models import FaviconConfig, VaultBackend
from .exceptions import VaultError
from .fetcher import FaviconFetcher
from .models import Failure, Found, NotFound
from .utils.url import build_favicon_url, cache_key, normalize_target, to_data_uri
from .vault import FileVault, MemoryVault, Vault

logger = logging.getLogger(__name__)


class FaviconManager:
    """
    Cache-first favicon retrieval.

    Args:
        vault: Vault holding cached favicons; its readiness is checked on
            every call
        fetcher: Remote fetcher used on cache misses
        clock: Time source for the ``created_at`` metadata of new entries

    Example:
        ```python
        async with FileVault("~/.favicon_fetch/vault") as vault:
            async with FaviconManager(vault) as manager:
                data_uri = await manager.fetch_favicon("example.com")
        ```
    """

    def __init__(
        self,
        vault: Vault,
        fetcher: Optional[FaviconFetcher] = None,
        clock: Clock = time.time,
    ) -> None:
        self.vault = vault
        self.cache = FaviconCache(vault, clock=clock)
        self.fetcher = fetcher or FaviconFetcher()
        self._owns_fetcher = fetcher is None
        self._owns_vault = False

    @classmethod
    def from_config(cls, config: Optional[FaviconConfig] = None) -> FaviconManager:
        """
        Build a manager with its own vault and fetcher.

        The vault is initialized when the manager is entered as an async
        context manager and closed on exit.
        """
        config = config or FaviconConfig()
        vault: Vault
        if config.vault.backend == VaultBackend.FILE:
            vault = FileVault(config.vault.directory)
        else:
            vault = MemoryVault()

        manager = cls(vault, FaviconFetcher(config.transport))
        manager._owns_fetcher = True
        manager._owns_vault = True
        return manager

    async def __aenter__(self) -> FaviconManager:
        if self._owns_vault and not self.vault.is_initialized():
            try:
                await self.vault.initialize()
            except VaultError as e:
                # Keep going without a cache
                logger.warning(f"Favicon vault unavailable: {e}")
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the fetcher and vault if this manager created them."""
        if self._owns_fetcher:
            await self.fetcher.close()
        if self._owns_vault:
            await self.vault.close()

    async def fetch_favicon(self, url: Optional[str]) -> Optional[str]:
        """
        Get the favicon for a domain or URL as a PNG data URI.

        Args:
            url: Domain or URL, with or without scheme

        Returns:
            ``data:image/png;base64,...`` string, or None if no icon is
            available

        Raises:
            InvalidURLError: If url is non-empty but has no usable hostname
        """
        if not url:
            return None

        target = normalize_target(url)
        hostname = target.hostname
        key = cache_key(hostname)
        is_ready = self.vault.is_initialized()

        match await self.cache.read(hostname, key, is_ready):
            case Found(data=data):
                return to_data_uri(data)
            case NotFound() | Failure():
                pass

        logger.debug(f"Fetching favicon from network: {hostname}", extra={"hostname": hostname})
        match await self.fetcher.fetch(build_favicon_url(target.normalized_url)):
            case Found(data=data):
                await self.cache.write(hostname, key, data, is_ready)
                return to_data_uri(data)
            case NotFound(status=status):
                logger.debug(
                    f"No favicon available for {hostname} (status {status})",
                    extra={"hostname": hostname, "status": status},
                )
                return None
            case Failure():
                return None


async def fetch_favicon(
    url: Optional[str],
    vault: Optional[Vault] = None,
    config: Optional[FaviconConfig] = None,
) -> Optional[str]:
    """
    Fetch a favicon with a short-lived fetcher.

    Args:
        url: Domain or URL, with or without scheme
        vault: Vault to use as cache; without one the cache is skipped
        config: Configuration for the HTTP transport

    Returns:
        PNG data URI, or None if no icon is available
    """
    config = config or FaviconConfig()
    async with FaviconFetcher(config.transport) as fetcher:
        manager = FaviconManager(vault or MemoryVault(), fetcher)
        return await manager.fetch_favicon(url)
