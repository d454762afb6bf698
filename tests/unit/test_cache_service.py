"""캐시 서비스 유닛 테스트 (Mock 사용)"""
import pytest
from unittest.mock import MagicMock, patch

from trivia_advisor.core.exceptions import (
    CacheConnectionException,
    CacheException,
    CacheSerializationException,
)
from trivia_advisor.engine.result import MatchOutcome
from trivia_advisor.schemas.venue_schema import ScoredVenue, VenueSummary
from trivia_advisor.services import MemoryMatchCacheService, RedisMatchCacheService
from trivia_advisor.utils.hash_utils import generate_match_cache_key


def _suggestions() -> MatchOutcome:
    venue = VenueSummary(
        id=102, name="City Ale House", slug="city-ale-house",
        city_slug="london", country_slug="united-kingdom",
    )
    return MatchOutcome.suggest([ScoredVenue(venue=venue, confidence=0.7143)])


def _redis_client() -> MagicMock:
    mock_client = MagicMock()
    mock_client.ping.return_value = True
    return mock_client


class TestRedisMatchCacheService:
    """Redis 캐시 서비스 테스트"""

    @patch('trivia_advisor.services.impl.cache_service.Redis')
    def test_init_success(self, mock_redis):
        """Redis 연결 성공"""
        mock_redis.from_url.return_value.ping.return_value = True

        service = RedisMatchCacheService(redis_url="redis://localhost:6379/0")
        assert service.redis_client is not None
        mock_redis.from_url.return_value.ping.assert_called_once()

    @patch('trivia_advisor.services.impl.cache_service.Redis')
    def test_init_failure(self, mock_redis):
        """Redis 연결 실패"""
        mock_redis.from_url.return_value.ping.side_effect = Exception("Connection failed")

        with pytest.raises(CacheConnectionException):
            RedisMatchCacheService(redis_url="redis://localhost:6379/0")

    @patch('trivia_advisor.services.impl.cache_service.Redis')
    def test_get_cache_hit(self, mock_redis):
        """캐시 히트"""
        mock_client = _redis_client()
        mock_client.get.return_value = _suggestions().model_dump_json()
        mock_redis.from_url.return_value = mock_client

        service = RedisMatchCacheService(redis_url="redis://localhost:6379/0")
        result = service.get("city-ale")

        assert isinstance(result, MatchOutcome)
        assert result.is_suggestions
        assert result.suggestions[0].venue.slug == "city-ale-house"
        mock_client.get.assert_called_once_with(generate_match_cache_key("city-ale"))

    @patch('trivia_advisor.services.impl.cache_service.Redis')
    def test_get_cache_miss(self, mock_redis):
        """캐시 미스"""
        mock_client = _redis_client()
        mock_client.get.return_value = None
        mock_redis.from_url.return_value = mock_client

        service = RedisMatchCacheService(redis_url="redis://localhost:6379/0")
        assert service.get("unknown-venue") is None

    @patch('trivia_advisor.services.impl.cache_service.Redis')
    def test_get_corrupted_data(self, mock_redis):
        """역직렬화 실패"""
        mock_client = _redis_client()
        mock_client.get.return_value = '{"kind": "redirect"}'
        mock_redis.from_url.return_value = mock_client

        service = RedisMatchCacheService(redis_url="redis://localhost:6379/0")
        with pytest.raises(CacheSerializationException):
            service.get("city-ale")

    @patch('trivia_advisor.services.impl.cache_service.Redis')
    def test_get_connection_error(self, mock_redis):
        mock_client = _redis_client()
        mock_client.get.side_effect = Exception("timeout")
        mock_redis.from_url.return_value = mock_client

        service = RedisMatchCacheService(redis_url="redis://localhost:6379/0")
        with pytest.raises(CacheException):
            service.get("city-ale")

    @patch('trivia_advisor.services.impl.cache_service.Redis')
    def test_set_cache(self, mock_redis):
        """캐시 저장 (TTL 포함)"""
        mock_client = _redis_client()
        mock_redis.from_url.return_value = mock_client

        service = RedisMatchCacheService(redis_url="redis://localhost:6379/0", ttl_seconds=900)
        assert service.set("city-ale", _suggestions()) is True

        key, ttl, value = mock_client.setex.call_args[0]
        assert key == generate_match_cache_key("city-ale")
        assert ttl == 900
        assert MatchOutcome.model_validate_json(value) == _suggestions()

    @patch('trivia_advisor.services.impl.cache_service.Redis')
    def test_set_connection_error(self, mock_redis):
        mock_client = _redis_client()
        mock_client.setex.side_effect = Exception("read only replica")
        mock_redis.from_url.return_value = mock_client

        service = RedisMatchCacheService(redis_url="redis://localhost:6379/0")
        with pytest.raises(CacheConnectionException):
            service.set("city-ale", MatchOutcome.no_match())

    @patch('trivia_advisor.services.impl.cache_service.Redis')
    def test_delete_cache(self, mock_redis):
        mock_client = _redis_client()
        mock_client.delete.return_value = 1
        mock_redis.from_url.return_value = mock_client

        service = RedisMatchCacheService(redis_url="redis://localhost:6379/0")
        assert service.delete("city-ale") is True

    @patch('trivia_advisor.services.impl.cache_service.Redis')
    def test_health_check(self, mock_redis):
        mock_client = _redis_client()
        mock_redis.from_url.return_value = mock_client

        service = RedisMatchCacheService(redis_url="redis://localhost:6379/0")
        assert service.health_check() is True

        mock_client.ping.side_effect = Exception("down")
        assert service.health_check() is False


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestMemoryMatchCacheService:
    """프로세스 내부 캐시 테스트"""

    def test_set_and_get(self):
        service = MemoryMatchCacheService(ttl_seconds=60, max_entries=10)
        outcome = _suggestions()

        service.set("city-ale", outcome)

        assert service.get("city-ale") == outcome
        assert service.get("other") is None

    def test_expires_after_ttl(self):
        clock = FakeClock()
        service = MemoryMatchCacheService(ttl_seconds=900, max_entries=10, clock=clock)
        service.set("city-ale", MatchOutcome.no_match())

        clock.now += 899
        assert service.get("city-ale") is not None

        clock.now += 1
        assert service.get("city-ale") is None
        assert len(service) == 0

    def test_evicts_oldest_when_full(self):
        service = MemoryMatchCacheService(ttl_seconds=60, max_entries=2)
        service.set("a-slug", MatchOutcome.no_match())
        service.set("b-slug", MatchOutcome.no_match())
        service.set("c-slug", MatchOutcome.no_match())

        assert len(service) == 2
        assert service.get("a-slug") is None
        assert service.get("c-slug") is not None

    def test_overwrite_refreshes_position(self):
        service = MemoryMatchCacheService(ttl_seconds=60, max_entries=2)
        service.set("a-slug", MatchOutcome.no_match())
        service.set("b-slug", MatchOutcome.no_match())
        service.set("a-slug", _suggestions())
        service.set("c-slug", MatchOutcome.no_match())

        assert service.get("b-slug") is None
        assert service.get("a-slug").is_suggestions

    def test_delete_and_clear(self):
        service = MemoryMatchCacheService(ttl_seconds=60, max_entries=10)
        service.set("a-slug", MatchOutcome.no_match())
        service.set("b-slug", MatchOutcome.no_match())

        assert service.delete("a-slug") is True
        assert service.delete("a-slug") is False

        service.clear()
        assert len(service) == 0
        assert service.health_check() is True
