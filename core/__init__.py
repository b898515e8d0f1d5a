# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the service layer:
# - models/: Pydantic schemas for users and auth
# - services/: User lookup and creation
# - auth_context.py: Request-scoped auth state
# =============================================================================
