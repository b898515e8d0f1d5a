# =============================================================================
# tests/test_bearer_gate.py - Bearer Token Gate Tests
# =============================================================================
# Covers Authorization header parsing and the 401 responses of protected
# routes. Tokens are never verified, so any non-empty token passes.
# =============================================================================

from unittest.mock import patch

import pytest

from app.auth import extract_bearer_token
from app.exceptions import INVALID_TOKEN, MISSING_OR_INVALID_TOKEN, UnauthorizedError


PROTECTED_URL = "/api/users/me"


# =============================================================================
# extract_bearer_token
# =============================================================================

class TestExtractBearerToken:
    """Test header parsing without HTTP."""

    def test_returns_token(self):
        assert extract_bearer_token("Bearer abc123") == "abc123"

    def test_takes_second_space_separated_field(self):
        assert extract_bearer_token("Bearer abc def") == "abc"

    @pytest.mark.parametrize("header", [None, "", "bearer abc123", "Basic dXNlcjpwYXNz", "Bearerabc123", "Token abc"])
    def test_missing_or_wrong_prefix(self, header):
        with pytest.raises(UnauthorizedError) as exc_info:
            extract_bearer_token(header)

        assert exc_info.value.message == MISSING_OR_INVALID_TOKEN
        assert exc_info.value.status_code == 401

    @pytest.mark.parametrize("header", ["Bearer ", "Bearer  abc123"])
    def test_empty_token(self, header):
        """A bare prefix, or a second space before the token, leaves nothing to use."""
        with pytest.raises(UnauthorizedError) as exc_info:
            extract_bearer_token(header)

        assert exc_info.value.message == INVALID_TOKEN


# =============================================================================
# authenticate (through HTTP)
# =============================================================================

class TestAuthenticateDependency:
    """Test the 401 contract on a protected route."""

    def test_missing_header(self, client):
        response = client.get(PROTECTED_URL)

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized: Missing or invalid token"}
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.parametrize("header", ["Basic dXNlcjpwYXNz", "bearer abc123", "Bearerabc123"])
    def test_wrong_prefix(self, client, header):
        response = client.get(PROTECTED_URL, headers={"Authorization": header})

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized: Missing or invalid token"}

    def test_empty_token(self, client):
        response = client.get(PROTECTED_URL, headers={"Authorization": "Bearer "})

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized: Invalid token"}

    def test_token_present_proceeds(self, client):
        response = client.get(PROTECTED_URL, headers={"Authorization": "Bearer abc123"})

        assert response.status_code == 200
        assert "error" not in response.json()

    def test_unverified_token_is_reported(self, client):
        """Any non-empty token passes; the response says it wasn't verified."""
        response = client.get(PROTECTED_URL, headers={"Authorization": "Bearer not-a-jwt"})

        assert response.json() == {"authenticated": True, "verified": False, "user": None}

    def test_unexpected_parse_failure_is_401(self, client):
        with patch("app.auth.dependencies.extract_bearer_token", side_effect=ValueError("boom")):
            response = client.get(PROTECTED_URL, headers={"Authorization": "Bearer abc123"})

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized: Invalid token"}


class TestCredential:
    """The credential never leaks its token through repr."""

    def test_repr_hides_token(self):
        from core.models.auth import Credential

        credential = Credential(token="s3cr3t")

        assert "s3cr3t" not in repr(credential)
        assert credential.verified is False
