"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging

import pytest

# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def verbose_library_logging():
    """Let caplog see the library's DEBUG records."""
    logging.getLogger("verdict").setLevel(logging.DEBUG)
