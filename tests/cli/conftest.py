"""Fixtures for CLI tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_mdcorpus_logging():
    """Drop console handlers bound to this test's captured stderr."""
    yield
    logger = logging.getLogger("mdcorpus")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
