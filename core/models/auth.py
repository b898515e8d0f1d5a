# =============================================================================
# core/models/auth.py - Authentication Schemas
# =============================================================================
# - Credential: the opaque bearer value taken from an Authorization header
# - AuthUser: the Supabase Auth user returned by sign-in / sign-up
# - SignInRequest / SignUpRequest: bodies for the /api/auth endpoints
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Credential(BaseModel):
    """
    Bearer credential extracted from an Authorization header.

    The token is opaque: nothing about its structure, signature or expiry
    has been checked, which `verified` makes explicit.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., min_length=1)
    verified: bool = False

    def __repr__(self) -> str:
        # Never put the raw token in logs or tracebacks
        return f"Credential(token='***', verified={self.verified})"

    __str__ = __repr__


class AuthUser(BaseModel):
    """
    User as reported by Supabase Auth.

    Only the fields this API reads are declared; the rest is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    email: str | None = None
    user_metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def full_name(self) -> str | None:
        return self.user_metadata.get("full_name")


class SignInRequest(BaseModel):
    """Body for POST /api/auth/signin."""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SignUpRequest(BaseModel):
    """Body for POST /api/auth/signup."""
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthUserResponse(BaseModel):
    """Signed-in user returned by the /api/auth endpoints."""
    id: str
    email: str | None = None
    full_name: str | None = None

    @classmethod
    def from_user(cls, user: AuthUser) -> "AuthUserResponse":
        return cls(id=user.id, email=user.email, full_name=user.full_name)
