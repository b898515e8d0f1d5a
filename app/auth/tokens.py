# =============================================================================
# app/auth/tokens.py - Access Token Issuing
# =============================================================================
# Signs the access token handed out by POST /api/users/login.
#
# Nothing in this API verifies these tokens yet: the bearer gate only checks
# that one is present.
# =============================================================================

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt

from app.config import settings


def create_access_token(
    user_id: int | str,
    email: str,
    expires_minutes: int | None = None,
) -> tuple[str, datetime]:
    """
    Sign an access token for a user.

    Args:
        user_id: Becomes the "sub" claim
        email: Copied into the "email" claim
        expires_minutes: Lifetime override (defaults to JWT_EXPIRES_MINUTES)

    Returns:
        Tuple of (encoded token, expiry timestamp)
    """
    minutes = expires_minutes or settings.JWT_EXPIRES_MINUTES
    expires_at = datetime.now(timezone.utc) + timedelta(minutes=minutes)

    payload: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "exp": expires_at,
    }
    token = jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    return token, expires_at
