"""
Hostname validation and canonicalization for the favicon_fetch library.

Hostnames are canonicalized the way browsers' URL parsers do it so cache keys
stay compatible with other clients sharing the same vault: lower-case ASCII,
punycode for internationalized names, bracketed and compressed IPv6 literals.
"""

from __future__ import annotations

import ipaddress
import re
from typing import Optional
from urllib.parse import SplitResult

from ..exceptions import InvalidURLError


class URLValidator:
    """Utility class for hostname validation and canonicalization."""

    VALID_SCHEMES = {"http", "https"}

    # Code points a URL host may never contain
    FORBIDDEN_HOST_PATTERN = re.compile(r"[\x00-\x20#%/:<>?@\[\\\]^|\x7f]")

    @classmethod
    def canonical_hostname(cls, parsed: SplitResult, url: Optional[str] = None) -> str:
        """
        Extract and canonicalize the hostname of a parsed URL.

        Args:
            parsed: Result of urllib.parse.urlsplit
            url: Caller input, used for error reporting

        Returns:
            str: Canonical hostname, never empty

        Raises:
            InvalidURLError: If the URL has no usable hostname or a malformed port
        """
        if parsed.scheme not in cls.VALID_SCHEMES:
            raise InvalidURLError(f"Unsupported scheme: {parsed.scheme!r}", url=url)

        try:
            hostname = parsed.hostname
            # Accessing port validates it
            parsed.port
        except ValueError as e:
            raise InvalidURLError(f"Invalid URL: {e}", url=url) from e

        if not hostname:
            raise InvalidURLError("URL has no hostname", url=url)

        if "[" in parsed.netloc:
            return cls._ipv6_literal(hostname, url)

        if not hostname.isascii():
            try:
                hostname = hostname.encode("idna").decode("ascii")
            except UnicodeError as e:
                raise InvalidURLError(f"Invalid internationalized hostname: {e}", url=url) from e

        if cls.FORBIDDEN_HOST_PATTERN.search(hostname):
            raise InvalidURLError(f"Invalid hostname: {hostname!r}", url=url)

        return hostname

    @classmethod
    def _ipv6_literal(cls, hostname: str, url: Optional[str]) -> str:
        try:
            address = ipaddress.IPv6Address(hostname)
        except ValueError as e:
            raise InvalidURLError(f"Invalid IPv6 address: {hostname!r}", url=url) from e
        return f"[{address.compressed}]"
