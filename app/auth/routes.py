# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Sign-in, sign-up and sign-out through Supabase Auth.
#
# Each request gets its own AuthContext (see app.auth.dependencies), so a
# sign-in here never changes another request's session.
# =============================================================================

import logging

from fastapi import APIRouter, Depends

from app.auth.dependencies import auth_context
from core.auth_context import AuthContext
from core.models.auth import AuthUserResponse, SignInRequest, SignUpRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signin", response_model=AuthUserResponse)
async def sign_in(
    body: SignInRequest,
    context: AuthContext = Depends(auth_context),
) -> AuthUserResponse:
    """
    Sign in with email and password.

    Raises:
        400: If Supabase rejects the credentials
    """
    user = context.sign_in(body.email, body.password)
    return AuthUserResponse.from_user(user)


@router.post("/signup", response_model=AuthUserResponse, status_code=201)
async def sign_up(
    body: SignUpRequest,
    context: AuthContext = Depends(auth_context),
) -> AuthUserResponse:
    """
    Create a Supabase Auth account.

    Raises:
        400: If Supabase rejects the sign-up
    """
    user = context.sign_up(body.name, body.email, body.password)
    return AuthUserResponse.from_user(user)


@router.post("/signout")
async def sign_out(context: AuthContext = Depends(auth_context)) -> dict:
    """Sign out the session held by this request's auth client."""
    context.sign_out()
    return {"success": True}
