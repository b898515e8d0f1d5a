# =============================================================================
# lib/ - Store and Auth Client Wrappers
# =============================================================================
# - supabase_client.py: Typed Supabase wrapper for the users table
# - auth_service.py: Supabase Auth sign-in / sign-up / sign-out
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.auth_service import AuthService

__all__ = [
    "SupabaseClient",
    "SupabaseClientError",
    "AuthService",
]
