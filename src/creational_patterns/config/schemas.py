"""Configuration schemas."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


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
    STDOUT = "stdout"
    BOTH = "both"
    NONE = "none"


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field(..., description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Maximum size before rotation")
    backup_count: int = Field(5, ge=0, description="Number of rotated files kept")
    format: str = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


class LogStdoutConfig(BaseModel):
    """Console log settings."""

    format: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    destination: str = Field("stdout", description="file, stdout, both or none")
    file: LogFileConfig
    stdout: LogStdoutConfig = Field(default_factory=LogStdoutConfig)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = [level.value for level in LogLevel]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        valid_destinations = [destination.value for destination in LogDestination]
        if v.lower() not in valid_destinations:
            raise ValueError(f"Log destination must be one of {valid_destinations}")
        return v.lower()


class AppConfig(BaseModel):
    """Application configuration."""

    app_name: str = Field("creational_patterns", description="Logger name for the application")
    logging: LoggingConfig
    config_file: Optional[str] = None
