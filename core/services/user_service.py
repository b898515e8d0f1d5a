# =============================================================================
# core/services/user_service.py - User Lookup and Creation
# =============================================================================
# Thin pass-through to the users table.
# No normalization, no hashing, no uniqueness pre-check: the store decides.
# =============================================================================

import hmac
import logging
from typing import Any

from lib.supabase_client import SupabaseClient
from core.models.user import UserCreate
from app.exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user record operations.

    Provides a clean interface between API routes and the users table.
    """

    @staticmethod
    def find_by_email(email: str) -> dict[str, Any] | None:
        """
        Look up a user by email.

        Args:
            email: Email exactly as supplied (no trimming or case folding)

        Returns:
            The user row, or None if no user has this email
        """
        user = SupabaseClient.fetch_user_by_email(email)
        if user is None:
            logger.debug("No user found for email lookup")
        return user

    @staticmethod
    def create(data: UserCreate) -> dict[str, Any]:
        """
        Create a user.

        The password is stored in plaintext.
        TODO: hash passwords before insert once a hashing scheme is chosen.

        Args:
            data: Email and password for the new user

        Returns:
            The created user row

        Raises:
            Exception: Store errors (e.g. duplicate email) propagate unchanged
        """
        try:
            user = SupabaseClient.insert_user(data.model_dump())
        except Exception as e:
            logger.error(f"Failed to create user: {e}")
            raise

        logger.info(f"Created user: {user.get('id')}")
        return user

    @staticmethod
    def verify_password(email: str, password: str) -> dict[str, Any]:
        """
        Check an email/password pair against the stored plaintext password.

        Returns:
            The matching user row

        Raises:
            InvalidCredentialsError: If the user doesn't exist or the password differs
        """
        user = UserService.find_by_email(email)

        stored = (user or {}).get("password") or ""
        if user is None or not hmac.compare_digest(stored.encode(), password.encode()):
            logger.warning("Login rejected: unknown email or wrong password")
            raise InvalidCredentialsError()

        return user
