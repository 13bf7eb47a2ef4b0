"""
Shared fixtures for the diagram creator test suite.

Provides: fixed clock, bundled sample requests, API test client
"""

import copy
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from diagram_creator.examples import EXAMPLES

FIXED_MOMENT = datetime(2024, 5, 17, 9, 30, 15, 123456, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same instant."""
    return lambda: FIXED_MOMENT


@pytest.fixture
def examples():
    """Deep copy of the bundled sample requests, safe to mutate."""
    return copy.deepcopy(EXAMPLES)


@pytest.fixture
def warnings():
    return []


@pytest.fixture
def client():
    from diagram_creator.main import app
    return TestClient(app)
