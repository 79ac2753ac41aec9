"""Configuration package."""

from .defaults import DEFAULT_CONFIG, ConfigurationManager, LogDestination, LogLevel
from .schemas import AppConfig, LoggingConfig

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationManager",
    "LogDestination",
    "LogLevel",
    "AppConfig",
    "LoggingConfig",
]
