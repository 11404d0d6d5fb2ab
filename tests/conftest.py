"""Shared pytest fixtures."""

import logging

import pytest

from nocap_verifier.utils.logging import PACKAGE_LOGGER, PackageStreamHandler


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so streams do not leak between tests."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler, PackageStreamHandler):
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
