# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================
# Registration, password login and the bearer-gated /me endpoint.
# =============================================================================

import logging

from fastapi import APIRouter

from app.auth.tokens import create_access_token
from app.dependencies import CredentialDep, UserServiceDep
from core.models.user import (
    LoginRequest,
    MeResponse,
    RegisterResponse,
    TokenResponse,
    UserCreate,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(body: UserCreate, users: UserServiceDep) -> RegisterResponse:
    """
    Register a new user.

    The password is stored as given. A duplicate email surfaces as whatever
    error the store raises (500 via the catch-all handler).
    """
    user = users.create(body)
    return RegisterResponse(user=UserResponse.model_validate(user))


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, users: UserServiceDep) -> TokenResponse:
    """
    Exchange email and password for an access token.

    Raises:
        401: If the email is unknown or the password doesn't match
    """
    user = users.verify_password(body.email, body.password)
    token, expires_at = create_access_token(user_id=user["id"], email=user["email"])
    logger.info(f"Issued access token for user: {user['id']}")
    return TokenResponse(token=token, expires_at=expires_at)


@router.get("/me", response_model=MeResponse)
async def me(credential: CredentialDep) -> MeResponse:
    """
    Report the caller's authentication status.

    Only token presence is checked, so the caller is authenticated but
    unverified and no user record is resolved.

    Raises:
        401: If the Authorization header is missing or malformed
    """
    return MeResponse(verified=credential.verified)
