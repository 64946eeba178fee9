"""
Shared fixtures for integration tests.

The full application runs against the in-memory store unless a test
module provides its own PostgreSQL fixtures.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from useraccounts.api.main import app
from useraccounts.config.settings import get_settings


@pytest.fixture
def memory_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Configure the app for the in-memory store and a cheap bcrypt cost."""
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("BCRYPT_COST", "4")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client(memory_settings: None) -> Generator[TestClient, None, None]:
    """Test client running the real app lifespan."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
