"""Shared fixtures for the contract_providers test suite."""
import logging

import pytest
import structlog

from contract_providers.infrastructure.di.components import ServiceRegistry


@pytest.fixture
def registry():
    """Fresh in-memory service registry."""
    return ServiceRegistry()


@pytest.fixture
def restore_logging():
    """Restore root logging and structlog configuration after a test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    structlog.reset_defaults()
