# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase operations:
# - A shared service-role client for the users table
# - Fresh anon-key clients for Supabase Auth (one per auth context)
# - Lookup and insert helpers for user records
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   user = SupabaseClient.fetch_user_by_email("x@example.com")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from app.config import settings

logger = logging.getLogger(__name__)

# PostgREST code for "single() matched zero rows"
NO_ROWS_CODE = "PGRST116"


class SupabaseClientError(Exception):
    """
    Error creating a Supabase client.

    Carries a code and a suggestion so the log line says how to fix it.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern for the service-role client. All methods
    are class methods for easy access without instantiation.

    Example:
        user = SupabaseClient.fetch_user_by_email("x@example.com")
        if user is None:
            ...
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                ) from e
        return cls._instance

    @classmethod
    def create_auth_client(cls) -> Client:
        """
        Create a new anon-key client for Supabase Auth.

        Auth calls store the signed-in session on the client, so each
        caller gets its own instance instead of the shared singleton.

        Raises:
            SupabaseClientError: If client creation fails
        """
        try:
            return create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to create Supabase auth client: {e}",
                code="AUTH_CLIENT_INIT_FAILED",
                suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file"
            ) from e

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (used by tests and on config reload)."""
        cls._instance = None

    # -------------------------------------------------------------------------
    # User Records
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_user_by_email(cls, email: str) -> dict[str, Any] | None:
        """
        Fetch a user row by exact email match.

        The email is passed through as given; no trimming or case folding.

        Args:
            email: Email address to look up

        Returns:
            User dict (id, email, password, created_at), or None if no row matches

        Raises:
            Exception: Any store error other than "no rows" propagates unchanged
        """
        client = cls.get_client()

        try:
            response = (
                client.table(settings.USERS_TABLE)
                .select("*")
                .eq("email", email)
                .single()
                .execute()
            )
        except Exception as e:
            if NO_ROWS_CODE in str(e):
                return None
            logger.error(f"Failed to fetch user by email: {e}")
            raise

        return response.data or None

    @classmethod
    def insert_user(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a user row and return it.

        Raises:
            Exception: Constraint violations and other store errors propagate unchanged
        """
        client = cls.get_client()

        response = (
            client.table(settings.USERS_TABLE)
            .insert(data)
            .execute()
        )

        if not response.data:
            raise RuntimeError(f"Insert into {settings.USERS_TABLE} returned no data")

        return response.data[0]
