# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.auth.dependencies import authenticate
from core.models.auth import Credential
from core.services.user_service import UserService


def get_user_service() -> type[UserService]:
    """
    Get the user service.

    Routes depend on this rather than importing UserService directly so
    tests can swap it with app.dependency_overrides.
    """
    return UserService


# Type aliases for dependency injection
UserServiceDep = Annotated[type[UserService], Depends(get_user_service)]
CredentialDep = Annotated[Credential, Depends(authenticate)]
