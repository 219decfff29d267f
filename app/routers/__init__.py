# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - prediction.py: Root greeting and predict endpoints
# - health.py: Health check endpoints
#
# Each router is mounted in main.py.
# =============================================================================

from . import health
from . import prediction

__all__ = [
    "health",
    "prediction",
]
