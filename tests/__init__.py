# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Curio API:
# - test_bearer_gate.py: Authorization header parsing and the 401 contract
# - test_session_gate.py: Page redirects driven by the session cookie
# - test_user_service.py: User lookup/creation against a mocked Supabase
# - test_auth_context.py: Uninitialized and request-bound auth contexts
# - test_api.py: Endpoint-level checks through the TestClient
# - test_config.py: Settings parsing
#
# Run tests with: pytest
# =============================================================================
