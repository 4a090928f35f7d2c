"""API routers for the REST API."""

from takeoff.web.routers.calculate import router as calculate_router
from takeoff.web.routers.export import router as export_router
from takeoff.web.routers.tiers import router as tiers_router

__all__ = [
    "calculate_router",
    "export_router",
    "tiers_router",
]
