"""Shared pytest fixtures."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_geoutm_logger():
    """Drop console handlers attached during a test.

    ``configure_logging`` binds a handler to whatever ``sys.stderr`` is at
    the time; under ``CliRunner`` that stream is closed after the test.
    """
    yield
    logger = logging.getLogger("geoutm")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
