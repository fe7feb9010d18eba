"""Shared fixtures for unit tests."""

from unittest.mock import Mock

import pytest

from cadence.utils.logging import ContextLogger


@pytest.fixture
def mock_logger():
    """Create a mock context logger."""
    logger = Mock(spec=ContextLogger)
    logger.info = Mock()
    logger.warning = Mock()
    logger.debug = Mock()
    logger.with_context = Mock(return_value=logger)
    return logger
