"""Venue Matcher - Main Engine Entry Point

레거시(V1) URL의 장소 슬러그가 더 이상 존재하지 않을 때 유사 장소를 찾습니다:
1. 슬러그 정규화 (숫자 ID 접미사, 이벤트 문구 제거)
2. 정규화 슬러그 완전 일치 → 즉시 리다이렉트
3. 후보 수집 → 신뢰도 점수 → 분류 (리다이렉트/추천/미발견)
"""

from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from trivia_advisor.core.exceptions import CatalogUnavailableException
from trivia_advisor.core.logging import logger, sanitize_for_log
from trivia_advisor.schemas.venue_schema import ScoredVenue, VenueSummary
from trivia_advisor.utils.slug import calculate_confidence, normalize_slug

from .cache_adapter import MatchCacheAdapter
from .candidates import CandidateRetriever, VenueCatalog
from .result import (
    MAX_SUGGESTIONS,
    REDIRECT_THRESHOLD,
    SUGGESTION_THRESHOLD,
    MatchOutcome,
)


class VenueMatcher:
    """장소 슬러그 퍼지 매처

    결과:
    - REDIRECT: 최고 후보 신뢰도 >= 0.90 (정규화 슬러그 완전 일치는 1.0)
    - SUGGESTIONS: 0.70 이상 후보 최대 5개 (신뢰도 내림차순)
    - NO_MATCH: 후보 없음

    카탈로그 조회 실패는 NO_MATCH가 아니라 CatalogUnavailableException으로 올라갑니다.
    """

    def __init__(self, catalog: VenueCatalog, cache: Optional[MatchCacheAdapter] = None):
        """
        Args:
            catalog: 읽기 전용 장소 카탈로그 (get_by_slug/find_by_slug_* 구현)
            cache: 결과 캐시 (없으면 매번 계산)
        """
        if catalog is None:
            raise ValueError("catalog must not be None")

        self.catalog = catalog
        self.retriever = CandidateRetriever(catalog)
        self.cache = cache

    def find_similar(self, missing_slug: str) -> MatchOutcome:
        """누락된 슬러그에 대한 매칭 결과 (원본 슬러그 기준 캐시)

        Raises:
            CatalogUnavailableException: 카탈로그 조회 실패 (캐시되지 않음)
        """
        if self.cache is None:
            return self._find_similar(missing_slug)
        return self.cache.get_or_compute(missing_slug, lambda: self._find_similar(missing_slug))

    def _find_similar(self, missing_slug: str) -> MatchOutcome:
        normalized = normalize_slug(missing_slug)
        safe_slug = sanitize_for_log(missing_slug)

        logger.debug(f"[matcher] Looking for '{safe_slug}', normalized to '{normalized}'")

        # 빈 검색어로 전체 카탈로그를 훑지 않도록 조회 없이 종료
        if not normalized:
            logger.info(f"[matcher] Empty slug after normalization: '{safe_slug}'")
            return MatchOutcome.no_match()

        try:
            # 1. 정규화 슬러그 완전 일치
            venue = self.catalog.get_by_slug(normalized)
            if venue is not None:
                logger.info(f"[matcher] Exact normalized match for '{safe_slug}' -> '{venue.slug}'")
                return MatchOutcome.redirect(VenueSummary.from_venue(venue), 1.0)

            # 2. 후보 수집 및 점수
            candidates = self.retriever.retrieve(normalized, missing_slug)
        except CatalogUnavailableException as e:
            logger.warning(f"[matcher] Catalog unavailable for '{safe_slug}': {e.error_code}")
            raise
        except SQLAlchemyError as e:
            logger.warning(f"[matcher] Catalog query failed for '{safe_slug}': {type(e).__name__}")
            raise CatalogUnavailableException("find_similar", type(e).__name__)

        scored = self.score_candidates(candidates, missing_slug, normalized)
        return self.decide(scored, safe_slug)

    @staticmethod
    def score_candidates(
        candidates: List[Any], original_slug: str, normalized_slug: str
    ) -> List[ScoredVenue]:
        """후보별 신뢰도 계산 → 임계값 미만 제거 → 내림차순 정렬 (동점은 수집 순서 유지)"""
        scored: List[ScoredVenue] = []
        for venue in candidates:
            confidence = calculate_confidence(venue.slug, original_slug, normalized_slug)
            if confidence >= SUGGESTION_THRESHOLD:
                scored.append(ScoredVenue(venue=VenueSummary.from_venue(venue), confidence=confidence))

        scored.sort(key=lambda s: s.confidence, reverse=True)
        return scored

    @staticmethod
    def decide(scored: List[ScoredVenue], safe_slug: str = "") -> MatchOutcome:
        """정렬된 후보로 최종 결과 결정"""
        if not scored:
            logger.info(f"[matcher] No matches found for '{safe_slug}'")
            return MatchOutcome.no_match()

        top = scored[0]
        if top.confidence >= REDIRECT_THRESHOLD:
            # 후보가 여럿이어도 최고 후보가 충분히 확실하면 바로 이동
            logger.info(
                f"[matcher] High confidence redirect for '{safe_slug}' -> "
                f"'{top.venue.slug}' ({top.confidence * 100:.1f}%)"
            )
            return MatchOutcome.redirect(top.venue, top.confidence)

        suggestions = scored[:MAX_SUGGESTIONS]
        logger.info(f"[matcher] Showing {len(suggestions)} suggestions for '{safe_slug}'")
        return MatchOutcome.suggest(suggestions)
