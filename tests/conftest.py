"""Shared pytest fixtures and configuration."""

import logging
from collections.abc import Iterator

import pytest


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: calls the live GitHub API (local only)")


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Detach handlers that setup_logging attached during a test."""
    yield
    logger = logging.getLogger("notion2github")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
