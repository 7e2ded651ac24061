"""
Utility modules for the favicon_fetch library.

URL normalization, cache key derivation and data URI encoding.
"""

from .url import (
    CACHE_KEY_PREFIX,
    DATA_URI_PREFIX,
    FAVICON_SERVICE_URL,
    FAVICON_SIZE,
    build_favicon_url,
    cache_key,
    ensure_scheme,
    normalize_target,
    to_data_uri,
)
from .validation import URLValidator

__all__ = [
    "CACHE_KEY_PREFIX",
    "DATA_URI_PREFIX",
    "FAVICON_SERVICE_URL",
    "FAVICON_SIZE",
    "URLValidator",
    "build_favicon_url",
    "cache_key",
    "ensure_scheme",
    "normalize_target",
    "to_data_uri",
]
