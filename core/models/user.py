# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - UserCreate: Input for registering a user (email + password)
# - UserResponse: Output when returning a user to clients (no password)
# - LoginRequest / TokenResponse: Password login and the issued token
#
# User records live in the Supabase users table. This service only proxies
# lookups and inserts; it applies no invariants of its own.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """
    Schema for creating a user.

    The password is stored as given. It is NOT hashed.

    Example:
        {
            "email": "ada@example.com",
            "password": "correct horse battery staple"
        }
    """

    # Stored exactly as received (no trimming or case folding)
    email: str = Field(
        ...,
        min_length=1,
        description="User email address"
    )

    password: str = Field(
        ...,
        min_length=1,
        description="Plaintext password"
    )


class UserResponse(BaseModel):
    """
    Schema for returning a user to clients.

    Built from a users table row; the password column is never exposed.
    """

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: int | str = Field(
        ...,
        description="User identifier assigned by the store"
    )

    email: str = Field(
        ...,
        description="User email address"
    )

    created_at: datetime | None = Field(
        default=None,
        description="Timestamp when the user was created"
    )


class RegisterResponse(BaseModel):
    """Returned by POST /api/users/register."""
    success: bool = True
    message: str = "User registered successfully"
    user: UserResponse


class LoginRequest(BaseModel):
    """Email/password pair for POST /api/users/login."""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Access token issued on a successful login."""
    success: bool = True
    token: str
    token_type: str = "bearer"
    expires_at: datetime


class MeResponse(BaseModel):
    """
    Returned by GET /api/users/me.

    The bearer gate checks token presence only, so the caller's identity
    is unknown and `user` is always None until verification exists.
    """
    authenticated: bool = True
    verified: bool = False
    user: UserResponse | None = None
