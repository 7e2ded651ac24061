"""
URL normalization and favicon addressing utilities.

This module turns arbitrary caller input into a TargetReference and derives
everything else from it: the vault cache key, the remote lookup URL and the
data URI returned to callers.
"""

from __future__ import annotations

import base64
from urllib.parse import urlsplit

from ..exceptions import InvalidURLError
from ..models import TargetReference
from .validation import URLValidator

CACHE_KEY_PREFIX = "favicon/"
FAVICON_SERVICE_URL = "https://www.google.com/s2/favicons"
FAVICON_SIZE = 64
DATA_URI_PREFIX = "data:image/png;base64,"


def ensure_scheme(url: str) -> str:
    """
    Lower-case a URL and make sure it carries an explicit http(s) scheme.

    Args:
        url: Domain or URL, with or without scheme

    Returns:
        Lower-cased URL starting with http:// or https://
    """
    lower_url = url.lower()
    if lower_url.startswith(("http://", "https://")):
        return lower_url
    return f"https://{lower_url}"


def normalize_target(url: str) -> TargetReference:
    """
    Normalize caller input into a TargetReference.

    Args:
        url: Non-empty domain or URL

    Returns:
        TargetReference with normalized URL and hostname

    Raises:
        InvalidURLError: If no hostname can be derived from the input
    """
    target_url = ensure_scheme(url.strip())

    try:
        parsed = urlsplit(target_url)
    except ValueError as e:
        raise InvalidURLError(f"Invalid URL: {e}", url=url) from e

    hostname = URLValidator.canonical_hostname(parsed, url=url)
    return TargetReference(raw_input=url, normalized_url=target_url, hostname=hostname)


def cache_key(hostname: str) -> str:
    """Vault key under which the favicon for hostname is stored."""
    return f"{CACHE_KEY_PREFIX}{hostname}"


def build_favicon_url(normalized_url: str) -> str:
    """
    Build the icon lookup URL for a normalized target URL.

    The target is embedded verbatim as the domain parameter.
    """
    return f"{FAVICON_SERVICE_URL}?domain={normalized_url}&sz={FAVICON_SIZE}"


def to_data_uri(data: bytes) -> str:
    """Encode raw image bytes as a PNG data URI."""
    return DATA_URI_PREFIX + base64.b64encode(data).decode("ascii")
