"""API routers for recast."""

from recast.api.routes_meta import router as meta_router
from recast.api.routes_rss import router as rss_router

__all__ = [
    "meta_router",
    "rss_router",
]
