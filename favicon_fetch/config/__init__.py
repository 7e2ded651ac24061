"""
Configuration management for favicon_fetch.

This module provides configuration models and loading from configuration
files and environment variables.
"""

from .loader import ConfigLoader, load_config
from .models import (
    FaviconConfig,
    LoggingConfig,
    LogLevel,
    TransportConfig,
    VaultBackend,
    VaultConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "FaviconConfig",
    "LoggingConfig",
    "LogLevel",
    "TransportConfig",
    "VaultBackend",
    "VaultConfig",
]
