# src/creational_patterns/config/defaults.py
from typing import Dict, Any, Optional
import copy
import os
import json

from pydantic import ValidationError as PydanticValidationError

from creational_patterns.config.schemas import AppConfig, LogDestination, LoggingConfig, LogLevel
from creational_patterns.domain.core.exceptions import ConfigurationError


DEFAULT_CONFIG = {
    "APP_NAME": "creational_patterns",
    "PATTERNS_CONFIG_FILE": "${PATTERNS_CONFIG_FILE:}",

    # Logging configuration
    "LOGGING_CONFIG": {
        "level": "${LOG_LEVEL:INFO}",
        "destination": "${LOG_DESTINATION:stdout}",
        "file": {
            "path": "${PATTERNS_LOG_DIR:logs}/creational_patterns.log"
        }
    },
}


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying user configuration overrides from a JSON file
    - Applying environment variable overrides
    - Variable interpolation
    - Configuration validation
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to a JSON configuration file. If not
                        provided, PATTERNS_CONFIG_FILE is used when set.
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        config_file = config_file or os.environ.get("PATTERNS_CONFIG_FILE")
        if config_file:
            self._load_config_file(config_file)

        # Load environment variables (highest priority)
        self._load_env_vars()

        self.validate_config()

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            with open(config_path, 'r') as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}")
        if not isinstance(user_config, dict):
            raise ConfigurationError(f"Configuration root must be an object: {config_path}")
        self.update_config(user_config)

    def _load_env_vars(self) -> None:
        """Load and apply environment variable overrides."""
        direct_mappings = {
            "LOG_LEVEL": ("LOGGING_CONFIG", "level"),
            "LOG_DESTINATION": ("LOGGING_CONFIG", "destination"),
        }

        for env_var, path in direct_mappings.items():
            if env_var in os.environ:
                self._set_nested_value(self._config, path, os.environ[env_var])

    def _set_nested_value(self, config: Dict[str, Any], path: tuple, value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate ${VAR} and ${VAR:default} placeholders in configuration values."""
        if isinstance(config, str):
            return self._interpolate_string(config)
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config

    @staticmethod
    def _interpolate_string(value: str) -> str:
        result = []
        pos = 0
        while True:
            start = value.find("${", pos)
            if start == -1:
                result.append(value[pos:])
                break
            end = value.find("}", start)
            if end == -1:
                result.append(value[pos:])
                break
            result.append(value[pos:start])
            var_name = value[start + 2:end]
            if ":" in var_name:
                var_name, default = var_name.split(":", 1)
                result.append(os.environ.get(var_name, default))
            else:
                result.append(os.environ.get(var_name, value[start:end + 1]))
            pos = end + 1
        return "".join(result)

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values.

        Args:
            user_config: Configuration dictionary from user config file
        """
        def deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
            for key, value in source.items():
                if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                    deep_update(target[key], value)
                else:
                    target[key] = value

        deep_update(self._config, user_config)

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        return self._interpolate_values(self._config)

    def get_logging_config(self) -> LoggingConfig:
        """Get the validated logging section."""
        return self.get_app_config().logging

    def get_app_config(self) -> AppConfig:
        """Get the configuration as a typed AppConfig."""
        config = self.get_config()
        try:
            return AppConfig(
                app_name=config["APP_NAME"],
                logging=LoggingConfig(**config["LOGGING_CONFIG"]),
                config_file=config.get("PATTERNS_CONFIG_FILE") or None,
            )
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    def validate_config(self) -> None:
        """
        Validate the configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config = self.get_config()
        missing = [key for key in ("APP_NAME", "LOGGING_CONFIG") if not config.get(key)]
        if missing:
            raise ConfigurationError("Missing required configuration", missing)
        self.get_app_config()
