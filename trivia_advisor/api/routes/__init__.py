"""API routes package."""

from .venue_routes import router as venue_router, page_router, get_match_cache, get_venue_matcher, get_venue_repository
from .health_routes import router as health_router

__all__ = ["health_router", "venue_router", "page_router", "get_match_cache", "get_venue_matcher", "get_venue_repository"]
