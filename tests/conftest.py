"""
Shared test fixtures for the xvalid test suite.
"""

import logging

import pytest


@pytest.fixture
def xvalid_debug_logs(caplog):
    """Capture xvalid debug log records.

    Usage:
        def test_something(xvalid_debug_logs):
            ...
            assert "Bound" in xvalid_debug_logs.text
    """
    with caplog.at_level(logging.DEBUG, logger="xvalid"):
        yield caplog
