"""
Configuration loader for favicon_fetch.

This module handles loading configuration from configuration files and
environment variables, in that order of precedence (environment wins).
"""

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .models import FaviconConfig


def _to_bool(value: str) -> bool:
    lower = value.strip().lower()
    if lower in ("true", "yes", "1", "on"):
        return True
    if lower in ("false", "no", "0", "off"):
        return False
    raise ValueError(f"not a boolean: {value!r}")


class ConfigLoader:
    """Configuration loader with support for multiple sources."""

    def __init__(self) -> None:
        """Initialize configuration loader."""
        self.config_paths = [
            Path("favicon_fetch.yaml"),
            Path("favicon_fetch.yml"),
            Path("favicon_fetch.json"),
            Path.home() / ".favicon_fetch" / "config.yaml",
            Path.home() / ".favicon_fetch" / "config.yml",
            Path.home() / ".favicon_fetch" / "config.json",
        ]

        # Environment variable prefix
        self.env_prefix = "FAVICON_FETCH_"

        self.env_mappings: Dict[str, Tuple[Tuple[str, ...], Callable[[str], Any]]] = {
            "LOG_LEVEL": (("logging", "level"), str.upper),
            "LOG_FILE": (("logging", "file_path"), str),
            "LOG_FORMAT": (("logging", "format"), str),
            "LOG_STRUCTURED": (("logging", "enable_structured"), _to_bool),
            "TIMEOUT": (("transport", "total_timeout"), float),
            "CONNECT_TIMEOUT": (("transport", "connect_timeout"), float),
            "VERIFY_SSL": (("transport", "verify_ssl"), _to_bool),
            "USER_AGENT": (("transport", "user_agent"), str),
            "VAULT_BACKEND": (("vault", "backend"), str.lower),
            "VAULT_DIR": (("vault", "directory"), str),
        }

    def load_config(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> FaviconConfig:
        """
        Load configuration from all available sources.

        Args:
            config_file: Specific config file to load

        Returns:
            FaviconConfig instance with merged configuration

        Raises:
            ConfigurationError: If a source cannot be parsed or the merged
                configuration fails validation
        """
        config_data: Dict[str, Any] = {}

        file_config = self._load_from_file(config_file)
        if file_config:
            config_data.update(file_config)

        env_config = self._load_from_environment()
        if env_config:
            config_data = self._deep_merge(config_data, env_config)

        try:
            return FaviconConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _load_from_file(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> Optional[Dict[str, Any]]:
        """Load configuration from file."""
        if config_file:
            config_path = Path(config_file)
            if not config_path.exists():
                raise ConfigurationError(
                    f"Config file not found: {config_path}", source=str(config_path)
                )
            return self._parse_config_file(config_path)

        for config_path in self.config_paths:
            if config_path.exists():
                return self._parse_config_file(config_path)

        return None

    def _parse_config_file(self, config_path: Path) -> Dict[str, Any]:
        """Parse configuration file based on extension."""
        suffix = config_path.suffix.lower()
        if suffix not in (".yaml", ".yml", ".json"):
            raise ConfigurationError(
                f"Unsupported config file format: {config_path.suffix}",
                source=str(config_path),
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to parse config file {config_path}: {e}",
                source=str(config_path),
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {config_path} must contain a mapping",
                source=str(config_path),
            )
        return data

    def _load_from_environment(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config: Dict[str, Any] = {}

        for name, (config_path, convert) in self.env_mappings.items():
            env_var = f"{self.env_prefix}{name}"
            value = os.getenv(env_var)
            if value is None:
                continue

            try:
                converted_value = convert(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid value for {env_var}: {e}", source=env_var
                ) from e

            current = config
            for key in config_path[:-1]:
                current = current.setdefault(key, {})
            current[config_path[-1]] = converted_value

        return config

    def _deep_merge(
        self, base: Dict[str, Any], override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def load_config(config_file: Optional[Union[str, Path]] = None) -> FaviconConfig:
    """Load configuration using the default loader."""
    return ConfigLoader().load_config(config_file)
