"""Pytest configuration and shared fixtures for fallible tests."""

import logging

import pytest
import structlog


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from fallible import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from fallible import Err

    return Err(ValueError('test error'))


@pytest.fixture
def restore_root_logger():
    """Undo configure_logging(): drop its handlers and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
