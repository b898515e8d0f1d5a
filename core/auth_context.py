# =============================================================================
# core/auth_context.py - Request-Scoped Auth Context
# =============================================================================
# Holds the signed-in user and the auth operations for one request.
#
# Until a context is bound, the current context is UNINITIALIZED: reading its
# state works, but calling sign_in / sign_up / sign_out raises
# AuthContextNotInitializedError.
#
# State lives in a ContextVar, so concurrent requests never share it.
#
# Usage:
#   token = bind_auth_context(AuthContext(AuthService()))
#   try:
#       get_auth_context().sign_in(email, password)
#   finally:
#       reset_auth_context(token)
# =============================================================================

from __future__ import annotations

import logging
from contextvars import ContextVar, Token
from enum import Enum

from app.exceptions import AuthContextNotInitializedError
from core.models.auth import AuthUser
from lib.auth_service import AuthService

logger = logging.getLogger(__name__)


class AuthContextState(str, Enum):
    """
    Lifecycle of an AuthContext.

    - uninitialized: default value, no service behind it
    - ready: bound to an AuthService
    """
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class AuthContext:
    """
    Auth state and operations for one request or session.

    Constructed without a service it is the UNINITIALIZED sentinel.
    """

    def __init__(self, service: AuthService | None = None):
        self._service = service
        self.user: AuthUser | None = None
        self.loading = service is None

    @property
    def state(self) -> AuthContextState:
        if self._service is None:
            return AuthContextState.UNINITIALIZED
        return AuthContextState.READY

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def _require_service(self, operation: str) -> AuthService:
        if self._service is None:
            raise AuthContextNotInitializedError(operation)
        return self._service

    def load(self) -> AuthUser | None:
        """Resolve the current user from the service's session."""
        service = self._require_service("load")
        try:
            self.user = service.get_current_user()
        finally:
            self.loading = False
        return self.user

    def sign_in(self, email: str, password: str) -> AuthUser:
        service = self._require_service("sign_in")
        self.user = service.sign_in(email, password)
        self.loading = False
        return self.user

    def sign_up(self, name: str, email: str, password: str) -> AuthUser:
        service = self._require_service("sign_up")
        self.user = service.sign_up(name, email, password)
        self.loading = False
        return self.user

    def sign_out(self) -> None:
        service = self._require_service("sign_out")
        service.sign_out()
        self.user = None

    def __repr__(self) -> str:
        return f"AuthContext(state={self.state.value}, authenticated={self.is_authenticated})"


UNINITIALIZED = AuthContext()

_current: ContextVar[AuthContext] = ContextVar("auth_context", default=UNINITIALIZED)


def get_auth_context() -> AuthContext:
    """Return the context bound to the current request, or UNINITIALIZED."""
    return _current.get()


def bind_auth_context(context: AuthContext) -> Token:
    """Bind `context` for the current request. Pass the token to reset_auth_context."""
    logger.debug(f"Binding {context!r}")
    return _current.set(context)


def reset_auth_context(token: Token) -> None:
    """Restore whatever context was bound before bind_auth_context."""
    _current.reset(token)
