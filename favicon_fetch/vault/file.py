"""
File-based vault backend with persistent storage.

Each key maps to two files named after the SHA-256 of the key: a ``.blob``
file with the raw bytes and a ``.json`` sidecar with the key, display name
and metadata.
"""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import aiofiles
import aiofiles.os

from ..exceptions import VaultError
from .base import Vault

logger = logging.getLogger(__name__)


class FileVault(Vault):
    """Vault storing blobs in a local directory."""

    def __init__(self, directory: Union[str, Path]) -> None:
        super().__init__()
        self.directory = Path(directory).expanduser()

    def _paths(self, key: str) -> tuple[Path, Path]:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.directory / f"{digest}.blob", self.directory / f"{digest}.json"

    async def initialize(self) -> None:
        try:
            await aiofiles.os.makedirs(self.directory, exist_ok=True)
        except OSError as e:
            raise VaultError(f"Cannot create vault directory {self.directory}: {e}") from e
        logger.debug(f"File vault ready at {self.directory}")
        await super().initialize()

    async def get_file(self, key: str) -> Optional[bytes]:
        self._require_initialized(key)
        blob_path, _ = self._paths(key)

        if not await aiofiles.os.path.exists(blob_path):
            return None

        try:
            async with aiofiles.open(blob_path, "rb") as f:
                return await f.read()
        except OSError as e:
            raise VaultError(f"Failed to read vault entry: {e}", key=key) from e

    async def add(
        self, key: str, metadata: Dict[str, Any], data: bytes, name: str
    ) -> None:
        self._require_initialized(key)
        blob_path, meta_path = self._paths(key)
        sidecar = {"key": key, "name": name, "metadata": metadata}

        try:
            tmp_path = blob_path.with_name(blob_path.name + ".tmp")
            async with aiofiles.open(tmp_path, "wb") as f:
                await f.write(bytes(data))
            await aiofiles.os.replace(tmp_path, blob_path)

            async with aiofiles.open(meta_path, "w", encoding="utf-8") as f:
                await f.write(json.dumps(sidecar))
        except (OSError, TypeError, ValueError) as e:
            raise VaultError(f"Failed to write vault entry: {e}", key=key) from e

    async def get_metadata(self, key: str) -> Optional[Dict[str, Any]]:
        """Get the sidecar record for key, or None if absent."""
        self._require_initialized(key)
        _, meta_path = self._paths(key)

        if not await aiofiles.os.path.exists(meta_path):
            return None

        try:
            async with aiofiles.open(meta_path, "r", encoding="utf-8") as f:
                return json.loads(await f.read())  # type: ignore[no-any-return]
        except (OSError, ValueError) as e:
            raise VaultError(f"Malformed vault metadata: {e}", key=key) from e

    async def keys(self) -> List[str]:
        """Get all stored keys."""
        keys = []
        for meta_path in sorted(self.directory.glob("*.json")):
            async with aiofiles.open(meta_path, "r", encoding="utf-8") as f:
                try:
                    keys.append(json.loads(await f.read())["key"])
                except (ValueError, KeyError):
                    logger.warning(f"Skipping malformed vault metadata {meta_path.name}")
        return keys
