"""Redis 캐시 서비스 - 장소 매칭 결과 캐싱만 담당"""
from typing import Optional
from pydantic import ValidationError
from redis import Redis

from trivia_advisor.core.config import settings
from trivia_advisor.core.logging import logger
from trivia_advisor.core.exceptions import (
    CacheConnectionException,
    CacheSerializationException,
)
from trivia_advisor.engine.result import MatchOutcome
from trivia_advisor.utils.hash_utils import generate_match_cache_key


class RedisMatchCacheService:
    """Redis 기반 매칭 결과 캐시 (여러 워커가 공유)"""

    def __init__(self, redis_url: Optional[str] = None, ttl_seconds: Optional[int] = None):
        """Redis 클라이언트 초기화"""
        self.ttl_seconds = ttl_seconds or settings.match_cache_ttl
        try:
            self.redis_client = Redis.from_url(
                redis_url or settings.redis_url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5
            )
            # 연결 테스트
            self.redis_client.ping()
            logger.info("Redis connection established")
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {e}")
            raise CacheConnectionException(
                reason=type(e).__name__,
                details={"reason": str(e)}
            )

    def get(self, missing_slug: str) -> Optional[MatchOutcome]:
        """
        캐시된 매칭 결과 조회

        Args:
            missing_slug: 원본 슬러그

        Returns:
            MatchOutcome 또는 None
        """
        cache_key = generate_match_cache_key(missing_slug)
        try:
            cached_data = self.redis_client.get(cache_key)
        except Exception as e:
            logger.error(f"Cache read error: {e}")
            raise CacheConnectionException(
                reason="read failed",
                details={"key": cache_key, "error": str(e)}
            )

        if not cached_data:
            logger.debug(f"Cache miss for key: {cache_key}")
            return None

        try:
            outcome = MatchOutcome.model_validate_json(cached_data)
        except ValidationError as e:
            logger.error(f"Failed to deserialize cache: {e}")
            raise CacheSerializationException(
                operation="deserialize",
                reason=str(e),
                details={"key": cache_key}
            )

        logger.debug(f"Cache hit for key: {cache_key}")
        return outcome

    def set(self, missing_slug: str, outcome: MatchOutcome) -> bool:
        """
        매칭 결과 캐싱

        Args:
            missing_slug: 원본 슬러그
            outcome: 저장할 결과

        Returns:
            성공 여부
        """
        cache_key = generate_match_cache_key(missing_slug)
        try:
            cached_value = outcome.model_dump_json()
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize cache data: {e}")
            raise CacheSerializationException(operation="serialize", reason=str(e))

        try:
            self.redis_client.setex(cache_key, self.ttl_seconds, cached_value)
        except Exception as e:
            logger.error(f"Cache write error: {e}")
            raise CacheConnectionException(
                reason="write failed",
                details={"key": cache_key, "error": str(e)}
            )

        logger.debug(f"Cache set for key: {cache_key}, TTL: {self.ttl_seconds}s")
        return True

    def delete(self, missing_slug: str) -> bool:
        """
        캐시 삭제

        Args:
            missing_slug: 원본 슬러그

        Returns:
            성공 여부
        """
        try:
            cache_key = generate_match_cache_key(missing_slug)
            result = self.redis_client.delete(cache_key)
            logger.info(f"Cache deleted for key: {cache_key}")
            return result > 0
        except Exception as e:
            logger.error(f"Cache delete error: {e}")
            return False

    def health_check(self) -> bool:
        """Redis 연결 상태 확인"""
        try:
            self.redis_client.ping()
            return True
        except Exception:
            return False
