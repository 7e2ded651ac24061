"""
Abstract vault interface.

A vault is a key-addressed persistent blob store with its own initialization
lifecycle. The favicon cache only ever reads and adds entries; vaults never
expire, evict or delete anything on their own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..exceptions import VaultNotReadyError


class Vault(ABC):
    """Abstract interface for vault backends."""

    def __init__(self) -> None:
        self._initialized = False

    def is_initialized(self) -> bool:
        """Check whether initialize() has completed."""
        return self._initialized

    async def initialize(self) -> None:
        """Prepare the backend for use."""
        self._initialized = True

    async def close(self) -> None:
        """Release backend resources."""
        self._initialized = False

    async def __aenter__(self) -> "Vault":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    def _require_initialized(self, key: str) -> None:
        if not self._initialized:
            raise VaultNotReadyError(
                f"{type(self).__name__} accessed before initialization", key=key
            )

    @abstractmethod
    async def get_file(self, key: str) -> Optional[bytes]:
        """Get stored bytes by key, or None if absent."""
        pass

    @abstractmethod
    async def add(
        self, key: str, metadata: Dict[str, Any], data: bytes, name: str
    ) -> None:
        """Store bytes under key together with metadata and a display name."""
        pass
