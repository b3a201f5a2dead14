"""Shared fixtures."""

import logging

import pytest

from src.utils.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_library_logger():
    """Drop handlers installed by setup_logging so they do not outlive capsys streams."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
