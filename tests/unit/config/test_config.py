"""Unit tests for configuration loading."""

import json

import pytest

from showcase.config import (
    DEFAULT_CONFIG,
    AppConfig,
    ConfigurationManager,
    LogDestination,
    LogLevel,
    OutputFormat,
)
from showcase.domain.core.exceptions import ConfigurationError


class TestConfigurationManager:
    """Test cases for ConfigurationManager."""

    def test_defaults_without_file(self):
        config = ConfigurationManager().get_config()

        assert isinstance(config, AppConfig)
        assert config.logging.level == LogLevel.WARNING
        assert config.logging.destination == LogDestination.STDERR
        assert config.output.format == OutputFormat.TEXT

    def test_raw_config_is_a_copy_of_defaults(self):
        raw = ConfigurationManager().get_raw_config()
        raw["logging"]["level"] = "DEBUG"

        assert DEFAULT_CONFIG["logging"]["level"] == "WARNING"

    def test_json_file_is_merged_over_defaults(self, tmp_path):
        # Arrange
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {"level": "DEBUG"}}))

        # Act
        config = ConfigurationManager(str(config_file)).get_config()

        # Assert
        assert config.logging.level == LogLevel.DEBUG
        assert config.logging.destination == LogDestination.STDERR
        assert config.logging.backup_count == 5

    def test_yaml_file(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("output:\n  format: yaml\nlogging:\n  destination: both\n")

        config = ConfigurationManager(str(config_file)).get_config()

        assert config.output.format == OutputFormat.YAML
        assert config.logging.destination == LogDestination.BOTH

    def test_empty_yaml_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("")

        assert ConfigurationManager(str(config_file)).get_config() == AppConfig()

    def test_config_is_cached(self):
        manager = ConfigurationManager()
        assert manager.get_config() is manager.get_config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            ConfigurationManager(str(tmp_path / "missing.json")).get_config()

    def test_unsupported_extension(self, tmp_path):
        config_file = tmp_path / "config.ini"
        config_file.write_text("[logging]\n")

        with pytest.raises(ConfigurationError, match="Unsupported configuration file type"):
            ConfigurationManager(str(config_file)).get_config()

    def test_malformed_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Cannot parse"):
            ConfigurationManager(str(config_file)).get_config()

    def test_non_mapping_document(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            ConfigurationManager(str(config_file)).get_config()

    @pytest.mark.parametrize(
        "override",
        [
            {"logging": {"level": "LOUD"}},
            {"output": {"format": "xml"}},
            {"logging": {"max_size_mb": 0}},
            {"unknown_section": {}},
        ],
    )
    def test_invalid_values(self, tmp_path, override):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps(override))

        with pytest.raises(ConfigurationError, match="Invalid configuration") as exc_info:
            ConfigurationManager(str(config_file)).get_config()

        assert exc_info.value.error_code == "CONFIGURATION_ERROR"
