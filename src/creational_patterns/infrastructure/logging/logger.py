import os
import logging
import structlog
from logging.handlers import RotatingFileHandler
from typing import Dict, Any, Optional

from pydantic import ValidationError as PydanticValidationError

from creational_patterns.config.defaults import ConfigurationManager
from creational_patterns.config.schemas import LoggingConfig
from creational_patterns.domain.core.exceptions import ConfigurationError


class DetailedFormatter(logging.Formatter):
    """Formatter that adds the caller's module, function and line to each record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def setup_logging(config: Optional[Dict[str, Any]] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Configuration dictionary from ConfigurationManager.
               If None, uses environment variables and defaults.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = ConfigurationManager().get_config()

    try:
        logging_config = LoggingConfig(**config["LOGGING_CONFIG"])
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid logging configuration: {e}")
    destination = logging_config.destination

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, logging_config.level))

    handlers = []

    if destination in ("file", "both"):
        log_file = os.path.expandvars(logging_config.file.path)
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=logging_config.file.max_size_mb * 1024 * 1024,
            backupCount=logging_config.file.backup_count
        )
        file_handler.setFormatter(DetailedFormatter(logging_config.file.format))
        handlers.append(file_handler)

    if destination in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(logging_config.stdout.format))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = get_logger(config.get("APP_NAME", "creational_patterns"))
    logger.debug(
        "Logging configured",
        log_level=logging_config.level,
        log_destination=destination,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the given name."""
    return structlog.get_logger(name)
