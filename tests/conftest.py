"""Pytest configuration and fixtures."""

import logging

import pytest

from fluent_assert.config import reset_settings


@pytest.fixture(autouse=True)
def reset_active_settings():
    """Start and end every test with default settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Strip handlers from fluent_assert loggers after each test.

    Module loggers are kept registered so they stay attached to the
    ``fluent_assert`` parent that setup_logger configures.
    """
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("fluent_assert"):
            continue
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
