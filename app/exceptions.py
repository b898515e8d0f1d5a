# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response carries an "error" key with a human-readable message.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class CurioException(Exception):
    """
    Base exception for the Curio API.

    All custom exceptions inherit from this class and are converted to
    JSON responses by `curio_exception_handler`.
    """

    def __init__(
        self,
        message: str,
        code: str = "CURIO_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}
        self.headers = headers

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Authentication Exceptions
# =============================================================================

MISSING_OR_INVALID_TOKEN = "Unauthorized: Missing or invalid token"
INVALID_TOKEN = "Unauthorized: Invalid token"


class UnauthorizedError(CurioException):
    """
    Raised by the bearer gate when a request carries no usable credential.

    The response body is exactly {"error": message} with status 401.
    """

    def __init__(self, message: str = INVALID_TOKEN):
        super().__init__(
            message=message,
            code="UNAUTHORIZED",
            status_code=401,
            headers={"WWW-Authenticate": "Bearer"},
        )

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class InvalidCredentialsError(CurioException):
    """Raised when an email/password pair doesn't match a stored user."""

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            code="INVALID_CREDENTIALS",
            status_code=401,
            suggestion="Check the email and password, or register first via POST /api/users/register",
        )


class AuthServiceError(CurioException):
    """Raised when Supabase Auth rejects a sign-in, sign-up or sign-out."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="AUTH_SERVICE_ERROR",
            status_code=400,
        )


class AuthContextNotInitializedError(CurioException):
    """Raised when an auth operation is used before a context is bound."""

    def __init__(self, operation: str):
        super().__init__(
            message="AuthContext not initialized",
            code="AUTH_CONTEXT_NOT_INITIALIZED",
            status_code=500,
            suggestion="Bind a context with bind_auth_context() or depend on app.auth.auth_context",
            details={"operation": operation},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def curio_exception_handler(
    request: Request,
    exc: CurioException
) -> JSONResponse:
    """
    Convert CurioException to JSON response.

    Returns the exception's to_dict() body with its status code and
    any headers it carries (e.g. WWW-Authenticate on 401).
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=exc.headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle request validation errors.

    Converts validation errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "error": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )
