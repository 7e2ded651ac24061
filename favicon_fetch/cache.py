"""
Best-effort favicon cache on top of a vault.

Reads and writes never raise: an unready vault is treated as empty, and any
vault error is logged and returned as a Failure outcome.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from .models import Failure, Found, NotFound, Outcome, VaultMetadata
from .vault import Vault

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class FaviconCache:
    """
    Read-through and write-through access to a vault.

    Args:
        vault: Backend storing favicon blobs
        clock: Returns the current time in seconds since the epoch; used
            for the ``created_at`` metadata of new entries
    """

    def __init__(self, vault: Vault, clock: Clock = time.time) -> None:
        self.vault = vault
        self.clock = clock

    async def read(self, hostname: str, key: str, is_ready: bool) -> Outcome:
        """
        Look up the cached favicon for hostname.

        Args:
            hostname: Hostname the key was derived from (for logging)
            key: Vault key
            is_ready: Whether the vault finished initializing

        Returns:
            Found with the cached bytes, NotFound on a miss, Failure if the
            vault raised
        """
        if not is_ready:
            return NotFound("vault not ready")

        try:
            cached = await self.vault.get_file(key)
        except Exception as e:
            logger.debug(
                f"Favicon cache read failed for {hostname}: {e}",
                extra={"hostname": hostname, "key": key},
            )
            return Failure(f"cache read failed: {e}", e)

        if not cached:
            return NotFound()

        logger.info(f"Favicon cache hit: {hostname}", extra={"hostname": hostname, "key": key})
        return Found(bytes(cached))

    async def write(
        self, hostname: str, key: str, data: bytes, is_ready: bool
    ) -> Outcome:
        """
        Store a favicon under key.

        Returns:
            Found on success, NotFound if the vault was not ready (nothing
            is written), Failure if the vault raised
        """
        if not is_ready:
            return NotFound("vault not ready")

        metadata = VaultMetadata(created_at=int(self.clock() * 1000))
        try:
            logger.debug(
                f"Storing favicon to cache: {hostname}",
                extra={"hostname": hostname, "key": key},
            )
            await self.vault.add(key, metadata.model_dump(), data, f"{hostname}.png")
        except Exception as e:
            logger.warning(
                f"Failed to cache favicon for {hostname}: {e}",
                extra={"hostname": hostname, "key": key},
            )
            return Failure(f"cache write failed: {e}", e)

        return Found(data)
