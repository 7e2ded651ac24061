"""In-memory vault backend."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import Vault


@dataclass
class VaultEntry:
    """Stored blob with its metadata."""

    key: str
    data: bytes
    name: str
    metadata: Dict[str, Any] = field(default_factory=dict)


class MemoryVault(Vault):
    """Process-local vault, mostly useful for tests and one-shot runs."""

    def __init__(self) -> None:
        super().__init__()
        self.entries: Dict[str, VaultEntry] = {}
        self._lock = asyncio.Lock()

    async def get_file(self, key: str) -> Optional[bytes]:
        self._require_initialized(key)
        async with self._lock:
            entry = self.entries.get(key)
            return entry.data if entry else None

    async def add(
        self, key: str, metadata: Dict[str, Any], data: bytes, name: str
    ) -> None:
        self._require_initialized(key)
        async with self._lock:
            self.entries[key] = VaultEntry(
                key=key, data=bytes(data), name=name, metadata=dict(metadata)
            )

    async def keys(self) -> List[str]:
        """Get all stored keys."""
        async with self._lock:
            return list(self.entries.keys())
