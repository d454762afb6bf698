"""프로세스 내부 캐시 서비스 - Redis 없이 매칭 결과 캐싱"""
import threading
import time
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from trivia_advisor.core.config import settings
from trivia_advisor.core.logging import logger
from trivia_advisor.engine.result import MatchOutcome
from trivia_advisor.utils.hash_utils import generate_match_cache_key


class MemoryMatchCacheService:
    """메모리 기반 매칭 결과 캐시 (TTL + 최대 항목 수)

    - 프로세스 수명 동안만 유지 (영속성 없음)
    - 가득 차면 가장 오래 저장된 항목부터 제거
    """

    def __init__(
        self,
        ttl_seconds: Optional[int] = None,
        max_entries: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds or settings.match_cache_ttl
        self.max_entries = max_entries or settings.match_cache_max_entries
        self._clock = clock
        self._lock = threading.Lock()
        self._store: "OrderedDict[str, Tuple[float, MatchOutcome]]" = OrderedDict()

    def get(self, missing_slug: str) -> Optional[MatchOutcome]:
        """캐시된 매칭 결과 조회 (만료 시 제거 후 None)"""
        cache_key = generate_match_cache_key(missing_slug)
        with self._lock:
            entry = self._store.get(cache_key)
            if entry is None:
                return None
            expires_at, outcome = entry
            if expires_at <= self._clock():
                del self._store[cache_key]
                logger.debug(f"Cache expired for key: {cache_key}")
                return None
        return outcome

    def set(self, missing_slug: str, outcome: MatchOutcome) -> bool:
        """매칭 결과 저장"""
        cache_key = generate_match_cache_key(missing_slug)
        with self._lock:
            self._store.pop(cache_key, None)
            self._store[cache_key] = (self._clock() + self.ttl_seconds, outcome)
            while len(self._store) > self.max_entries:
                self._store.popitem(last=False)
        return True

    def delete(self, missing_slug: str) -> bool:
        """캐시 삭제"""
        with self._lock:
            return self._store.pop(generate_match_cache_key(missing_slug), None) is not None

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def health_check(self) -> bool:
        return True
