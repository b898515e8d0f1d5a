# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication:
# - authenticate: bearer gate for protected API routes
# - auth_context: binds a request-scoped AuthContext
#
# The bearer gate checks that a token is PRESENT. It does not verify the
# signature, expiry or claims, and attaches no identity to the request.
#
# Usage:
#   from app.auth import authenticate, Credential
#
#   @router.get("/protected")
#   async def protected(credential: Credential = Depends(authenticate)):
#       ...
# =============================================================================

import logging
from typing import AsyncIterator

from fastapi import Request

from app.exceptions import (
    INVALID_TOKEN,
    MISSING_OR_INVALID_TOKEN,
    UnauthorizedError,
)
from core.auth_context import AuthContext, bind_auth_context, reset_auth_context
from core.models.auth import Credential
from lib.auth_service import AuthService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(header: str | None) -> str:
    """
    Pull the token out of an Authorization header value.

    The prefix match is case-sensitive and needs exactly one space. The token
    is the second space-separated field, so "Bearer a b" yields "a" and
    "Bearer  a" (two spaces) yields "".

    Args:
        header: Raw Authorization header, or None if absent

    Returns:
        The non-empty token

    Raises:
        UnauthorizedError: "Missing or invalid token" if the header is absent
            or lacks the prefix, "Invalid token" if the token is empty
    """
    if not header or not header.startswith(BEARER_PREFIX):
        raise UnauthorizedError(MISSING_OR_INVALID_TOKEN)

    token = header.split(" ")[1]

    if not token:
        raise UnauthorizedError(INVALID_TOKEN)

    return token


async def authenticate(request: Request) -> Credential:
    """
    Reject requests without a usable bearer token.

    This dependency:
    1. Reads the Authorization header
    2. Extracts the bearer token (see extract_bearer_token)
    3. Returns it as an unverified Credential

    Any unexpected failure while parsing becomes a 401 "Invalid token".

    Raises:
        UnauthorizedError: 401 with {"error": ...}
    """
    try:
        token = extract_bearer_token(request.headers.get("authorization"))
    except UnauthorizedError as e:
        logger.warning(f"Rejected {request.method} {request.url.path}: {e.message}")
        raise
    except Exception as e:
        logger.warning(f"Rejected {request.method} {request.url.path}: unparseable header ({type(e).__name__})")
        raise UnauthorizedError(INVALID_TOKEN) from e

    # TODO: verify the token (signature, expiry, claims) and resolve the
    # caller's identity; until then presence is the only check.
    return Credential(token=token)


async def auth_context() -> AsyncIterator[AuthContext]:
    """
    Bind a fresh AuthContext for the duration of one request.

    The context is reset afterwards, so code running outside a request sees
    the UNINITIALIZED context again.
    """
    context = AuthContext(AuthService())
    token = bind_auth_context(context)
    try:
        yield context
    finally:
        reset_auth_context(token)
