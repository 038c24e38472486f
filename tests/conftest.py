"""
Pytest configuration and shared fixtures.
"""

import json
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from financial_analysis.main import app

FIXTURES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "fixtures")


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "drift: deterministic output guards")


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def load_fixture():
    """Load a JSON fixture from tests/fixtures by file name."""

    def _load(name):
        with open(os.path.join(FIXTURES_DIR, name), encoding="utf-8") as fh:
            return json.load(fh)

    return _load
