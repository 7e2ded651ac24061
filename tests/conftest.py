"""
Shared test fixtures and configuration for the favicon_fetch test suite.
"""

import tempfile
from pathlib import Path
from typing import AsyncGenerator, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
import aioresponses

from favicon_fetch import FaviconFetcher, MemoryVault, TransportConfig, Vault

FIXED_TIME = 1700000000.5


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def png_bytes() -> bytes:
    """Bytes standing in for a favicon image."""
    return b"\x89PNG\r\n\x1a\nfake-image-data"


@pytest.fixture
def fixed_clock() -> MagicMock:
    """Clock that always returns the same timestamp."""
    return MagicMock(return_value=FIXED_TIME)


@pytest.fixture
async def memory_vault() -> AsyncGenerator[MemoryVault, None]:
    """Initialized in-memory vault."""
    async with MemoryVault() as vault:
        yield vault


@pytest.fixture
def mock_vault() -> MagicMock:
    """Vault double with a ready flag and async read/write methods."""
    vault = MagicMock(spec=Vault)
    vault.is_initialized.return_value = True
    vault.get_file = AsyncMock(return_value=None)
    vault.add = AsyncMock(return_value=None)
    return vault


@pytest.fixture
def mock_aiohttp():
    """Mock aiohttp responses for testing."""
    with aioresponses.aioresponses() as m:
        yield m


@pytest.fixture
async def favicon_fetcher() -> AsyncGenerator[FaviconFetcher, None]:
    """Create a FaviconFetcher with short timeouts."""
    config = TransportConfig(total_timeout=2.0, connect_timeout=1.0)
    async with FaviconFetcher(config) as fetcher:
        yield fetcher
