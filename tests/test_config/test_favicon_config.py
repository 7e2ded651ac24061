"""
Tests for configuration models and loading.
"""

import json
import os
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from favicon_fetch.config import (
    ConfigLoader,
    FaviconConfig,
    LogLevel,
    TransportConfig,
    VaultBackend,
    VaultConfig,
    load_config,
)
from favicon_fetch.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, temp_dir):
    """Keep host config files and variables out of the tests."""
    for name in list(os.environ):
        if name.startswith("FAVICON_FETCH_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(temp_dir)
    monkeypatch.setenv("HOME", str(temp_dir / "home"))


class TestConfigModels:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = FaviconConfig()

        assert config.transport.total_timeout == 10.0
        assert config.transport.verify_ssl is True
        assert config.vault.backend == VaultBackend.FILE
        assert config.logging.level == LogLevel.INFO

    def test_vault_directory_is_expanded(self):
        config = VaultConfig(directory="~/icons")

        assert isinstance(config.directory, Path)
        assert "~" not in str(config.directory)

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            FaviconConfig(unknown_section={})

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            TransportConfig(total_timeout=0)

    def test_assignment_is_validated(self):
        config = FaviconConfig()

        with pytest.raises(ValidationError):
            config.transport = "not a transport config"


class TestConfigLoader:
    """Test loading configuration from files and environment."""

    def test_no_sources_gives_defaults(self):
        assert ConfigLoader().load_config() == FaviconConfig()

    def test_load_json_file(self, temp_dir):
        config_file = temp_dir / "custom.json"
        config_file.write_text(
            json.dumps({"transport": {"total_timeout": 3.5}, "vault": {"backend": "memory"}}),
            encoding="utf-8",
        )

        config = load_config(config_file)

        assert config.transport.total_timeout == 3.5
        assert config.vault.backend == VaultBackend.MEMORY

    def test_load_yaml_file(self, temp_dir):
        config_file = temp_dir / "custom.yaml"
        config_file.write_text(
            yaml.safe_dump({"logging": {"level": "DEBUG", "enable_structured": True}}),
            encoding="utf-8",
        )

        config = load_config(config_file)

        assert config.logging.level == LogLevel.DEBUG
        assert config.logging.enable_structured is True

    def test_discovers_default_file_in_working_directory(self, temp_dir):
        (temp_dir / "favicon_fetch.yml").write_text(
            "vault:\n  directory: /tmp/discovered-vault\n", encoding="utf-8"
        )

        config = load_config()

        assert config.vault.directory == Path("/tmp/discovered-vault")

    def test_empty_yaml_file(self, temp_dir):
        config_file = temp_dir / "empty.yaml"
        config_file.write_text("", encoding="utf-8")

        assert load_config(config_file) == FaviconConfig()

    def test_environment_overrides_file(self, temp_dir, monkeypatch):
        config_file = temp_dir / "custom.json"
        config_file.write_text(json.dumps({"transport": {"total_timeout": 3.5}}), encoding="utf-8")
        monkeypatch.setenv("FAVICON_FETCH_TIMEOUT", "1")
        monkeypatch.setenv("FAVICON_FETCH_VERIFY_SSL", "no")
        monkeypatch.setenv("FAVICON_FETCH_LOG_LEVEL", "warning")
        monkeypatch.setenv("FAVICON_FETCH_VAULT_DIR", str(temp_dir / "env-vault"))

        config = load_config(config_file)

        assert config.transport.total_timeout == 1.0
        assert config.transport.verify_ssl is False
        assert config.logging.level == LogLevel.WARNING
        assert config.vault.directory == temp_dir / "env-vault"

    def test_invalid_environment_value(self, monkeypatch):
        monkeypatch.setenv("FAVICON_FETCH_VERIFY_SSL", "maybe")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config()

        assert exc_info.value.source == "FAVICON_FETCH_VERIFY_SSL"

    def test_missing_explicit_file(self, temp_dir):
        with pytest.raises(ConfigurationError):
            load_config(temp_dir / "missing.json")

    def test_unsupported_format(self, temp_dir):
        config_file = temp_dir / "config.toml"
        config_file.write_text("[transport]\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_malformed_file(self, temp_dir):
        config_file = temp_dir / "broken.json"
        config_file.write_text("{broken", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_file_must_contain_mapping(self, temp_dir):
        config_file = temp_dir / "list.yaml"
        config_file.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_invalid_values_raise_configuration_error(self, temp_dir):
        config_file = temp_dir / "bad.json"
        config_file.write_text(json.dumps({"vault": {"backend": "redis"}}), encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(config_file)
