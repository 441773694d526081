"""
API routers for walks service endpoints.
"""

from . import health_router, regions_router, walk_difficulties_router, walks_router

__all__ = ["health_router", "regions_router", "walk_difficulties_router", "walks_router"]
