"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from app.main import app
from app.services.snapshot_store import get_snapshot_store


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture(autouse=True)
def reset_sessions():
    """Start every test with no calculator sessions."""
    get_snapshot_store().clear()
    yield
    get_snapshot_store().clear()


@pytest.fixture
def client():
    """Create test client. Cookies persist across requests, like a browser."""
    return TestClient(app)
