# =============================================================================
# app/auth/session_gate.py - Session-Gated Page Routing
# =============================================================================
# Redirects browser navigations based on whether a session cookie is present.
#
# Only the dashboard and the login/signup pages are gated; every other path
# passes straight through. The cookie is never decoded or verified.
#
# Rules (first match wins):
#   auth page + session     -> /dashboard
#   auth page, no session   -> allow
#   other gated, no session -> /login?from=<path>
#   other gated + session   -> allow
# =============================================================================

import logging
from dataclasses import dataclass
from urllib.parse import urlencode

from fastapi import Request
from fastapi.responses import RedirectResponse

from app.config import settings

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
SIGNUP_PATH = "/signup"
DASHBOARD_PATH = "/dashboard"

AUTH_PAGE_PREFIXES = (LOGIN_PATH, SIGNUP_PATH)


@dataclass(frozen=True)
class GateDecision:
    """Outcome for one navigation: allow it, or redirect to `location`."""
    location: str | None = None

    @property
    def allowed(self) -> bool:
        return self.location is None


ALLOW = GateDecision()


def is_gated(path: str) -> bool:
    """True for /dashboard, /dashboard/<anything>, /login and /signup."""
    if path in (LOGIN_PATH, SIGNUP_PATH, DASHBOARD_PATH):
        return True
    return path.startswith(DASHBOARD_PATH + "/")


def decide(path: str, has_session: bool) -> GateDecision:
    """
    Apply the rule table to a gated path.

    Args:
        path: Request path (already known to be gated)
        has_session: Whether a session cookie was sent

    Returns:
        ALLOW, or a GateDecision carrying the redirect location
    """
    if path.startswith(AUTH_PAGE_PREFIXES):
        if has_session:
            return GateDecision(location=DASHBOARD_PATH)
        return ALLOW

    if not has_session:
        return GateDecision(location=f"{LOGIN_PATH}?{urlencode({'from': path})}")

    return ALLOW


def has_session_cookie(request: Request) -> bool:
    """Whether any configured session cookie is present with a non-empty value."""
    return any(request.cookies.get(name) for name in settings.session_cookie_names_list)


async def session_gate(request: Request, call_next):
    """HTTP middleware: redirect gated navigations, pass everything else through."""
    path = request.url.path or ""

    if not is_gated(path):
        return await call_next(request)

    decision = decide(path, has_session_cookie(request))
    if decision.allowed:
        return await call_next(request)

    logger.debug("Session gate redirect %s -> %s", path, decision.location)
    return RedirectResponse(url=decision.location, status_code=307)
