# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - users.py: Registration, login and the bearer-gated /me endpoint
# - pages.py: Page endpoints behind the session gate
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import users
from . import pages

__all__ = [
    "health",
    "users",
    "pages",
]
