# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Bearer-token gate for API routes, session-cookie gate for pages, and
# request-scoped auth context for Supabase Auth.
#
# Usage:
#   from app.auth import authenticate, Credential
#
#   @router.get("/protected")
#   async def protected(credential: Credential = Depends(authenticate)):
#       return {"ok": True}
# =============================================================================

from app.auth.dependencies import auth_context, authenticate, extract_bearer_token
from app.auth.session_gate import GateDecision, decide, is_gated, session_gate
from app.auth.tokens import create_access_token
from core.models.auth import Credential

__all__ = [
    "auth_context",
    "authenticate",
    "extract_bearer_token",
    "GateDecision",
    "decide",
    "is_gated",
    "session_gate",
    "create_access_token",
    "Credential",
]
