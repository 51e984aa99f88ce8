"""Shared pytest fixtures."""

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore loguru's default handler after tests that reconfigure it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
