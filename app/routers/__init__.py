# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - properties.py: Property CRUD and boundary area endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import properties

__all__ = [
    "health",
    "properties",
]
