# tests/conftest.py
"""Shared fixtures: a test client bound to a fresh, empty store."""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.store import StringStore


@pytest.fixture
def store():
    fresh = StringStore()
    previous = app.state.store
    app.state.store = fresh
    yield fresh
    app.state.store = previous


@pytest.fixture
def client(store):
    with TestClient(app) as test_client:
        yield test_client
