import logging
import pytest
import structlog

from creational_patterns.creational.abstract_factory import DataSourceType
from creational_patterns.creational.factory_method import Canada, Spain, Greece, USA


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore root handlers and structlog defaults after each test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            handler.close()
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables that override configuration."""
    for name in ("LOG_LEVEL", "LOG_DESTINATION", "PATTERNS_LOG_DIR", "PATTERNS_CONFIG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def all_countries():
    return [Canada, Spain, Greece("x"), USA("y")]


@pytest.fixture(params=list(DataSourceType))
def data_source_tag(request):
    return request.param
