"""API routers for the REST API."""

from printsheet.web.routers.calculate import router as calculate_router
from printsheet.web.routers.layout import router as layout_router
from printsheet.web.routers.presets import router as presets_router
from printsheet.web.routers.pricing import router as pricing_router
from printsheet.web.routers.validate import router as validate_router

__all__ = [
    "calculate_router",
    "layout_router",
    "presets_router",
    "pricing_router",
    "validate_router",
]
