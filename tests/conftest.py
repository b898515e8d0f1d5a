# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an HTTP test client and mocked Supabase fixtures
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

SESSION_COOKIE = "next-auth.session-token"

# What PostgREST reports when .single() matches zero rows
NO_ROWS_ERROR = (
    "{'code': 'PGRST116', 'details': 'The result contains 0 rows', "
    "'message': 'JSON object requested, multiple (or no) rows returned'}"
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fastapi_app():
    """The FastAPI application with dependency overrides cleared afterwards."""
    from app.main import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(fastapi_app):
    """HTTP client that returns 500 responses instead of raising."""
    with TestClient(fastapi_app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def mock_supabase_client():
    """
    Replace the service-role Supabase client with a MagicMock.

    Query chains (table().select().eq().single().execute()) resolve to
    the same mocks, so tests configure the terminal execute().
    """
    client = MagicMock(name="supabase")
    with patch("lib.supabase_client.SupabaseClient.get_client", return_value=client):
        yield client


@pytest.fixture
def sample_user_row():
    """A users table row as returned by Supabase."""
    return {
        "id": 42,
        "email": "ada@example.com",
        "password": "analytical-engine",
        "created_at": "2024-01-15T10:00:00+00:00",
    }
