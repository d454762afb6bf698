"""Cache Adapter - get-or-compute over a match cache backend"""

from typing import Callable, Optional, Protocol

from trivia_advisor.core.exceptions import CacheException
from trivia_advisor.core.logging import logger, sanitize_for_log

from .result import MatchOutcome


class MatchCacheBackend(Protocol):
    """Redis/메모리 캐시 서비스 공통 인터페이스"""

    def get(self, missing_slug: str) -> Optional[MatchOutcome]: ...

    def set(self, missing_slug: str, outcome: MatchOutcome) -> bool: ...


class MatchCacheAdapter:
    """매칭 결과 캐시 어댑터

    캐시 서비스를 VenueMatcher가 기대하는 get-or-compute 인터페이스로 변환합니다.
    캐시 장애는 로깅만 하고 계산 결과를 그대로 반환합니다 (요청을 실패시키지 않음).
    """

    def __init__(self, cache_service: MatchCacheBackend):
        """
        Args:
            cache_service: 캐시 서비스 (get/set 구현)

        Raises:
            ValueError: cache_service가 None인 경우
        """
        if cache_service is None:
            raise ValueError("cache_service must not be None")
        self.cache_service = cache_service

    def get_or_compute(
        self, missing_slug: str, compute_fn: Callable[[], MatchOutcome]
    ) -> MatchOutcome:
        """캐시 조회 → 미스면 계산 후 저장

        Args:
            missing_slug: 원본(정규화 전) 슬러그 - 캐시 키
            compute_fn: 결과 계산 함수

        Returns:
            MatchOutcome

        Raises:
            compute_fn의 예외는 그대로 전파되며, 그 경우 아무것도 캐시하지 않습니다.
        """
        try:
            cached = self.cache_service.get(missing_slug)
        except CacheException as e:
            logger.warning(f"Match cache get failed: {e.error_code}")
            cached = None

        if cached is not None:
            logger.debug(f"Match cache hit: '{sanitize_for_log(missing_slug)}'")
            return cached

        outcome = compute_fn()

        try:
            self.cache_service.set(missing_slug, outcome)
        except CacheException as e:
            logger.warning(f"Match cache set failed: {e.error_code}")

        return outcome
