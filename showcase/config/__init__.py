"""Configuration package."""

from .defaults import DEFAULT_CONFIG, LogDestination, LogLevel, OutputFormat
from .manager import ConfigurationManager
from .schemas import AppConfig, LoggingConfig, OutputConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "OutputConfig",
    "ConfigurationManager",
    "DEFAULT_CONFIG",
    "LogLevel",
    "LogDestination",
    "OutputFormat",
]
