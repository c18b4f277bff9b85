"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from posts_api.app.core.store import store
from posts_api.app.main import app
from posts_api.app.schemas.post import PostRead


@pytest.fixture(autouse=True)
def post_store():
    """Reset the shared store to a single known post before every test."""
    store.reset([PostRead(id=1, user_id=1, title="Test Post", body="Test Content")])
    yield store
    store.reset()


@pytest.fixture
def client():
    """Create a test client"""
    return TestClient(app)
