"""
Pytest configuration and shared fixtures for unit tests.
"""

import pytest

# Sample lines from the kubelet CRI log format documentation
STDOUT_LINE = "2016-10-06T00:17:09.669794202Z stdout P log content 1"
STDERR_LINE = "2016-10-06T00:17:09.669794203Z stderr F log content 2"

VALID_TIMESTAMP = "2016-10-06T00:17:09.669794202Z"


@pytest.fixture
def stdout_line():
    """A partial (P) line written to stdout."""
    return STDOUT_LINE


@pytest.fixture
def stderr_line():
    """A full (F) line written to stderr."""
    return STDERR_LINE


@pytest.fixture
def valid_timestamp():
    """An RFC 3339 timestamp with nanoseconds in UTC."""
    return VALID_TIMESTAMP
