# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoint
# - roman.py: Roman numeral conversion endpoint
#
# Each router is mounted in main.py.
# =============================================================================

from . import health
from . import roman

__all__ = [
    "health",
    "roman",
]
