"""캐시 서비스 - export only."""

from .impl import MemoryMatchCacheService, RedisMatchCacheService

__all__ = ["MemoryMatchCacheService", "RedisMatchCacheService"]
