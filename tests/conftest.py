"""Root test configuration."""

import logging

import pytest
import structlog

from juiceconfig.default import reset_default_store


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


@pytest.fixture(autouse=True)
def _clean_default_store():
    """Every test starts without a process-wide default store."""
    reset_default_store()
    yield
    reset_default_store()


@pytest.fixture
def write_config(tmp_path):
    """Write a JSON config file and return its path."""

    def _write(content: str, name: str = "config.json"):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
