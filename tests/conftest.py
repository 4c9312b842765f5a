"""Shared test fixtures for thinhttp."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records emitted by the thinhttp loggers."""
    caplog.set_level(logging.DEBUG, logger="thinhttp")
    return caplog
