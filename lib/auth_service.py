# =============================================================================
# lib/auth_service.py - Supabase Auth Wrapper
# =============================================================================
# Sign-in, sign-up and sign-out against Supabase Auth.
#
# Each AuthService owns its own anon-key client, so one request's session
# never leaks into another's.
#
# Usage:
#   service = AuthService()
#   user = service.sign_in("ada@example.com", "secret")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import Client

from app.exceptions import AuthServiceError
from core.models.auth import AuthUser
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)


def _to_auth_user(user: Any) -> AuthUser:
    """Convert a Supabase (gotrue) User object into our AuthUser."""
    if isinstance(user, dict):
        return AuthUser.model_validate(user)
    if hasattr(user, "model_dump"):
        return AuthUser.model_validate(user.model_dump())
    return AuthUser.model_validate(user, from_attributes=True)


class AuthService:
    """Supabase Auth operations bound to one client."""

    def __init__(self, client: Client | None = None):
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = SupabaseClient.create_auth_client()
        return self._client

    def get_current_user(self) -> AuthUser | None:
        """Return the user of this client's session, or None if signed out."""
        response = self.client.auth.get_user()
        user = getattr(response, "user", None) if response else None
        logger.debug(f"get_current_user resolved: {user is not None}")
        return _to_auth_user(user) if user else None

    def sign_in(self, email: str, password: str) -> AuthUser:
        """
        Sign in with email and password.

        Raises:
            AuthServiceError: If Supabase rejects the credentials or returns no user
        """
        logger.info("Attempting sign in")
        try:
            response = self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as e:
            logger.warning(f"Sign in error: {e}")
            raise AuthServiceError(str(e)) from e

        if not response.user:
            raise AuthServiceError("User not found")

        logger.info("Sign in successful")
        return _to_auth_user(response.user)

    def sign_up(self, name: str, email: str, password: str) -> AuthUser:
        """
        Create a Supabase Auth account, storing `name` as full_name metadata.

        Raises:
            AuthServiceError: If Supabase rejects the sign-up or returns no user
        """
        logger.info("Attempting sign up")
        try:
            response = self.client.auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {"data": {"full_name": name}},
                }
            )
        except Exception as e:
            logger.warning(f"Sign up error: {e}")
            raise AuthServiceError(str(e)) from e

        if not response.user:
            raise AuthServiceError("Failed to create user")

        logger.info("Sign up successful")
        return _to_auth_user(response.user)

    def sign_out(self) -> None:
        """
        Sign out this client's session.

        Raises:
            AuthServiceError: If Supabase reports an error
        """
        logger.info("Attempting sign out")
        try:
            self.client.auth.sign_out()
        except Exception as e:
            logger.warning(f"Sign out error: {e}")
            raise AuthServiceError(str(e)) from e
        logger.info("Sign out successful")
