"""
Exception hierarchy for the favicon fetcher.

Only InvalidURLError is expected to reach callers of fetch_favicon; vault and
network failures are absorbed where they occur and turned into outcomes.
"""

from __future__ import annotations

from typing import Any, Optional


class FaviconError(Exception):
    """
    Base exception for all favicon operations.

    Attributes:
        message: Human-readable error message
        url: Input or URL that caused the error (if applicable)
        details: Additional error details as keyword arguments
    """

    def __init__(self, message: str, url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.details = kwargs


class InvalidURLError(FaviconError, ValueError):
    """
    Raised when input cannot be turned into a URL with a usable hostname.

    Subclasses ValueError so callers that only know about URL parsing
    errors can still catch it.
    """

    pass


class VaultError(FaviconError):
    """Raised by vault adapters when a read or write fails."""

    def __init__(self, message: str, key: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.key = key


class VaultNotReadyError(VaultError):
    """Raised when a vault is accessed before initialize() completed."""

    pass


class ConfigurationError(FaviconError):
    """Raised when configuration cannot be loaded or validated."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source
