# =============================================================================
# tests/test_user_service.py - User Service Tests
# =============================================================================
# Tests for user lookup and creation.
#
# Tests use a mocked Supabase client to avoid database calls.
# =============================================================================

from unittest.mock import patch

import pytest

from app.exceptions import InvalidCredentialsError
from core.models.user import UserCreate
from core.services.user_service import UserService
from tests.conftest import NO_ROWS_ERROR


def _lookup_execute(client):
    """The execute() mock at the end of the find-by-email query chain."""
    return client.table.return_value.select.return_value.eq.return_value.single.return_value.execute


def _insert_execute(client):
    return client.table.return_value.insert.return_value.execute


# =============================================================================
# find_by_email
# =============================================================================

class TestFindByEmail:
    """Test user lookup by email."""

    def test_empty_store_returns_none(self, mock_supabase_client):
        """No matching row is "not found", not an error."""
        _lookup_execute(mock_supabase_client).side_effect = Exception(NO_ROWS_ERROR)

        assert UserService.find_by_email("x@example.com") is None

    def test_returns_matching_row(self, mock_supabase_client, sample_user_row):
        _lookup_execute(mock_supabase_client).return_value.data = sample_user_row

        user = UserService.find_by_email("ada@example.com")

        assert user == sample_user_row
        mock_supabase_client.table.assert_called_once_with("users")

    def test_email_is_not_normalized(self, mock_supabase_client):
        _lookup_execute(mock_supabase_client).side_effect = Exception(NO_ROWS_ERROR)

        UserService.find_by_email("  Ada@Example.COM ")

        eq = mock_supabase_client.table.return_value.select.return_value.eq
        eq.assert_called_once_with("email", "  Ada@Example.COM ")

    def test_store_failure_propagates(self, mock_supabase_client):
        _lookup_execute(mock_supabase_client).side_effect = ConnectionError("connection refused")

        with pytest.raises(ConnectionError):
            UserService.find_by_email("ada@example.com")


# =============================================================================
# create
# =============================================================================

class TestCreate:
    """Test user creation."""

    def test_inserts_plaintext_password(self, mock_supabase_client, sample_user_row):
        _insert_execute(mock_supabase_client).return_value.data = [sample_user_row]

        user = UserService.create(UserCreate(email="ada@example.com", password="analytical-engine"))

        assert user == sample_user_row
        mock_supabase_client.table.return_value.insert.assert_called_once_with(
            {"email": "ada@example.com", "password": "analytical-engine"}
        )

    def test_constraint_violation_propagates(self, mock_supabase_client):
        """No uniqueness pre-check: the store's error reaches the caller as-is."""
        error = Exception("duplicate key value violates unique constraint \"users_email_key\"")
        _insert_execute(mock_supabase_client).side_effect = error

        with pytest.raises(Exception) as exc_info:
            UserService.create(UserCreate(email="ada@example.com", password="x"))

        assert exc_info.value is error

    def test_no_lookup_before_insert(self, mock_supabase_client, sample_user_row):
        _insert_execute(mock_supabase_client).return_value.data = [sample_user_row]

        UserService.create(UserCreate(email="ada@example.com", password="x"))

        mock_supabase_client.table.return_value.select.assert_not_called()


# =============================================================================
# verify_password
# =============================================================================

class TestVerifyPassword:
    """Test plaintext password comparison used by login."""

    @pytest.fixture
    def mock_find(self, sample_user_row):
        with patch.object(UserService, "find_by_email", return_value=sample_user_row) as mock:
            yield mock

    def test_matching_password(self, mock_find, sample_user_row):
        assert UserService.verify_password("ada@example.com", "analytical-engine") == sample_user_row

    def test_wrong_password(self, mock_find):
        with pytest.raises(InvalidCredentialsError):
            UserService.verify_password("ada@example.com", "difference-engine")

    def test_unknown_email(self):
        with patch.object(UserService, "find_by_email", return_value=None):
            with pytest.raises(InvalidCredentialsError):
                UserService.verify_password("nobody@example.com", "x")
