"""
Cache-first favicon retrieval with AIOHTTP.

This package looks up a website's favicon in a persistent vault keyed by
hostname and falls back to a remote icon lookup service on a miss, storing
what it fetched for next time.

Features:
- Async/await retrieval with a single public entry point
- Vault and network failures degrade gracefully instead of raising
- File-based and in-memory vault backends
- Results returned uniformly as PNG data URIs
"""

from .cache import FaviconCache
from .config import (
    ConfigLoader,
    FaviconConfig,
    LoggingConfig,
    LogLevel,
    TransportConfig,
    VaultBackend,
    VaultConfig,
    load_config,
)
from .exceptions import (
    ConfigurationError,
    FaviconError,
    InvalidURLError,
    VaultError,
    VaultNotReadyError,
)
from .fetcher import FaviconFetcher
from .manager import FaviconManager, fetch_favicon
from .models import Failure, Found, NotFound, Outcome, TargetReference, VaultMetadata
from .utils import build_favicon_url, cache_key, normalize_target, to_data_uri
from .vault import FileVault, MemoryVault, Vault

__version__ = "0.1.0"

__all__ = [
    # Retrieval
    "FaviconManager",
    "fetch_favicon",
    "FaviconCache",
    "FaviconFetcher",
    # Vaults
    "Vault",
    "FileVault",
    "MemoryVault",
    # Models
    "TargetReference",
    "VaultMetadata",
    "Found",
    "NotFound",
    "Failure",
    "Outcome",
    # URL helpers
    "normalize_target",
    "cache_key",
    "build_favicon_url",
    "to_data_uri",
    # Configuration
    "ConfigLoader",
    "load_config",
    "FaviconConfig",
    "LoggingConfig",
    "LogLevel",
    "TransportConfig",
    "VaultBackend",
    "VaultConfig",
    # Exceptions
    "FaviconError",
    "InvalidURLError",
    "VaultError",
    "VaultNotReadyError",
    "ConfigurationError",
]
