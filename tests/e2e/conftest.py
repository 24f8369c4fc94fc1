"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from forum.interface.api.app import create_app
from forum.persistence.repository.inmemory import InMemoryStore
from tests.di import build_app_container


@pytest.fixture
def client():
    """Create test client backed by one in-memory store for all requests."""
    app_instance = create_app(build_app_container(InMemoryStore()))
    return TestClient(app_instance)
