"""Services implementation package."""

from .cache_service import RedisMatchCacheService
from .memory_cache_service import MemoryMatchCacheService

__all__ = ["RedisMatchCacheService", "MemoryMatchCacheService"]
