"""
Configuration models for favicon_fetch.

This module defines all configuration data models with validation and defaults.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class VaultBackend(str, Enum):
    """Vault backend types."""

    MEMORY = "memory"
    FILE = "file"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Default logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    file_path: Optional[Path] = Field(default=None, description="Log file path")
    enable_console: bool = Field(default=True, description="Enable console logging")
    enable_structured: bool = Field(
        default=False, description="Enable structured JSON logging"
    )


class TransportConfig(BaseModel):
    """HTTP transport configuration for the icon lookup service."""

    total_timeout: float = Field(
        default=10.0, gt=0, description="Total request timeout in seconds"
    )
    connect_timeout: float = Field(
        default=5.0, gt=0, description="Connection timeout in seconds"
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    user_agent: str = Field(
        default="FaviconFetch/0.1.0", description="User-Agent header"
    )


class VaultConfig(BaseModel):
    """Vault configuration."""

    backend: VaultBackend = Field(
        default=VaultBackend.FILE, description="Vault backend type"
    )
    directory: Path = Field(
        default=Path.home() / ".favicon_fetch" / "vault",
        description="Directory used by the file backend",
    )

    @field_validator("directory", mode="before")
    @classmethod
    def ensure_path(cls, v: Any) -> Path:
        """Ensure paths are Path objects."""
        return Path(v).expanduser() if not isinstance(v, Path) else v.expanduser()


class FaviconConfig(BaseModel):
    """Global configuration container."""

    transport: TransportConfig = Field(default_factory=TransportConfig)
    vault: VaultConfig = Field(default_factory=VaultConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(validate_assignment=True, extra="forbid")
