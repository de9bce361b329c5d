"""
Shared pytest fixtures and configuration for Ripple tests.
"""

import pytest

from tests.test_factories import (
    create_manual_source,
    create_readable_stream,
    create_recorder,
)


@pytest.fixture
def recorder():
    """Provide a fresh recording observer."""
    return create_recorder()


@pytest.fixture
def manual():
    """Provide a hand-driven source."""
    return create_manual_source()


@pytest.fixture
def other_manual():
    """Provide a second, independent hand-driven source."""
    return create_manual_source()


@pytest.fixture
def stream():
    """Provide a fake readable stream."""
    return create_readable_stream()
