# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# - user.py: User create/response and login schemas
# - auth.py: Bearer credential and Supabase Auth schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .auth import (
    AuthUser,
    AuthUserResponse,
    Credential,
    SignInRequest,
    SignUpRequest,
)
from .user import (
    LoginRequest,
    MeResponse,
    RegisterResponse,
    TokenResponse,
    UserCreate,
    UserResponse,
)

__all__ = [
    # Auth
    "AuthUser",
    "AuthUserResponse",
    "Credential",
    "SignInRequest",
    "SignUpRequest",
    # Users
    "LoginRequest",
    "MeResponse",
    "RegisterResponse",
    "TokenResponse",
    "UserCreate",
    "UserResponse",
]
