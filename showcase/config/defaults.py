# showcase/config/defaults.py
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDERR = "stderr"
    BOTH = "both"


class OutputFormat(str, Enum):
    """Output format enumeration."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


DEFAULT_CONFIG = {
    # Logging configuration
    "logging": {
        "level": LogLevel.WARNING.value,
        "destination": LogDestination.STDERR.value,
        "file_path": "logs/showcase.log",
        "max_size_mb": 10,
        "backup_count": 5,
        "format": "%(message)s",
    },

    # Output configuration
    "output": {
        "format": OutputFormat.TEXT.value,
    },
}
