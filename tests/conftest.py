# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import os

# Settings are read at import time; give startup validation what it needs.
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("SESSION_SECRET_KEY", "test-session-secret")

import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock
from typing import Generator

from main import create_app
from core.config import settings
from core.session_store import encode_session
from models.auth import Session


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    return create_app()


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


def _make_session(role: str, username: str = "tester") -> Session:
    return Session(user_id="1", username=username, role=role, location_id="10")


@pytest.fixture
def make_session():
    """Build a session record for a role."""
    return _make_session


@pytest.fixture
def login_as(client):
    """Put a signed session cookie for the given role on the test client."""

    def _login_as(role: str, username: str = "tester") -> Session:
        session = _make_session(role, username)
        client.cookies.set(settings.SESSION_COOKIE_NAME, encode_session(session))
        return session

    return _login_as


@pytest.fixture
def mock_supabase_client():
    """Create a mock Supabase client."""
    mock_client = Mock()
    mock_table = Mock()
    mock_client.table.return_value = mock_table
    return mock_client


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Reset login rate limiting before each test."""
    from core.rate_limiter import reset_rate_limits as _reset
    _reset()
    yield
    _reset()
