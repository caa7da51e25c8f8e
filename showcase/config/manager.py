"""Configuration loading.

Configuration is built from ``DEFAULT_CONFIG`` with an optional JSON or YAML
file merged over it, then validated against ``AppConfig``.
"""
import copy
import json
import os
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from showcase.domain.core.exceptions import ConfigurationError

from .defaults import DEFAULT_CONFIG
from .schemas import AppConfig


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigurationManager:
    """Loads and validates application configuration."""

    SUPPORTED_EXTENSIONS = (".json", ".yaml", ".yml")

    def __init__(self, config_file: Optional[str] = None):
        self._config_file = config_file
        self._config: Optional[AppConfig] = None

    def _load_file(self, path: str) -> Dict[str, Any]:
        extension = os.path.splitext(path)[1].lower()
        if extension not in self.SUPPORTED_EXTENSIONS:
            raise ConfigurationError(f"Unsupported configuration file type: {extension or path}")

        try:
            with open(path, encoding="utf-8") as f:
                if extension == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot parse configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data

    def get_raw_config(self) -> Dict[str, Any]:
        """Get the merged configuration dictionary before validation."""
        if self._config_file is None:
            return copy.deepcopy(DEFAULT_CONFIG)
        return _deep_merge(DEFAULT_CONFIG, self._load_file(self._config_file))

    def get_config(self) -> AppConfig:
        """Get the validated configuration, loading it on first use."""
        if self._config is None:
            try:
                self._config = AppConfig.model_validate(self.get_raw_config())
            except ValidationError as e:
                missing = [".".join(str(p) for p in err["loc"]) for err in e.errors() if err["type"] == "missing"]
                raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=missing) from e
        return self._config
