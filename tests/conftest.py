"""
Shared pytest fixtures for ledgerkit tests.

This module provides common fixtures including:
- Session handle mocks with healthy and failing transports
- Cleanup of the tracked session registry
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ledgerkit.logging_config import SessionTokenFilter
from ledgerkit.modules.session import SessionHandle, TransportError


# =============================================================================
# Session Handle Mocking Infrastructure
# =============================================================================

@pytest.fixture
def mock_handle():
    """Session handle whose abort succeeds."""
    handle = MagicMock(spec=SessionHandle)
    handle.ledger_name = "vehicle-registration"
    handle.token = "tok-1234567890"
    handle.send_abort = MagicMock(return_value=None)
    return handle


@pytest.fixture
def failing_handle(mock_handle):
    """Session handle whose abort fails with a transport error."""
    mock_handle.send_abort.side_effect = TransportError("connection reset by peer")
    return mock_handle


@pytest.fixture(autouse=True)
def clear_token_registry():
    """Keep tracked sessions from leaking between tests."""
    yield
    SessionTokenFilter._sessions.clear()


# =============================================================================
# Test Markers Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: Tests that take a long time to run"
    )
