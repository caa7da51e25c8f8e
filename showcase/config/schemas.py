"""Application configuration schemas."""
from pydantic import BaseModel, ConfigDict, Field

from .defaults import LogDestination, LogLevel, OutputFormat


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDERR, description="Where log records go")
    file_path: str = Field("logs/showcase.log", description="Log file path for file destinations")
    max_size_mb: int = Field(10, gt=0, description="Rotate the log file after this many megabytes")
    backup_count: int = Field(5, ge=0, description="Number of rotated log files to keep")
    format: str = Field("%(message)s", description="stdlib logging format string")


class OutputConfig(BaseModel):
    """Output configuration."""
    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = Field(OutputFormat.TEXT, description="Default output format")


class AppConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
