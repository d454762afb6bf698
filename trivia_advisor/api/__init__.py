"""API 엔드포인트 패키지 - export only."""

from .routes import health_router, venue_router, page_router, get_match_cache, get_venue_matcher, get_venue_repository

__all__ = ["health_router", "venue_router", "page_router", "get_match_cache", "get_venue_matcher", "get_venue_repository"]
