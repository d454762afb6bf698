"""Venue Routes - 장소 페이지/매칭/검색

HTTP Layer는 조회와 매처 결과를 HTTP 응답으로 변환하는 Translator 역할만 수행합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session

from trivia_advisor.core.config import settings
from trivia_advisor.core.database import get_db
from trivia_advisor.core.exceptions import (
    CacheConnectionException,
    CatalogUnavailableException,
    InvalidSlugException,
)
from trivia_advisor.core.logging import logger, sanitize_for_log
from trivia_advisor.core.security import SecurityValidator, log_request
from trivia_advisor.engine import MatchCacheAdapter, MatchOutcome, VenueMatcher
from trivia_advisor.repositories import VenueRepository
from trivia_advisor.schemas.venue_schema import (
    CityResponse,
    VenueNotFoundResponse,
    VenueResponse,
    VenueSearchResponse,
    VenueSuggestion,
    VenueSummary,
)
from trivia_advisor.services import MemoryMatchCacheService, RedisMatchCacheService

router = APIRouter(prefix="/api/v1/venues", tags=["venues"], dependencies=[Depends(log_request)])
page_router = APIRouter(tags=["pages"], dependencies=[Depends(log_request)])

NOT_FOUND_MESSAGE = "Venue not found"

# 싱글톤 캐시 (모든 요청이 공유)
_match_cache: Optional[MatchCacheAdapter] = None


def get_match_cache() -> MatchCacheAdapter:
    """매칭 결과 캐시 싱글톤

    redis 백엔드 연결에 실패하면 프로세스 내부 캐시로 동작합니다.
    """
    global _match_cache
    if _match_cache is None:
        if settings.match_cache_backend == "redis":
            try:
                backend = RedisMatchCacheService()
            except CacheConnectionException as e:
                logger.warning(f"[API] Redis match cache unavailable, using memory cache: {e.error_code}")
                backend = MemoryMatchCacheService()
        else:
            backend = MemoryMatchCacheService()
        _match_cache = MatchCacheAdapter(backend)
    return _match_cache


def get_venue_repository(db: Session = Depends(get_db)) -> VenueRepository:
    return VenueRepository(db)


def get_venue_matcher(
    repository: VenueRepository = Depends(get_venue_repository),
    cache: MatchCacheAdapter = Depends(get_match_cache),
) -> VenueMatcher:
    """요청 단위 VenueMatcher (세션은 요청마다, 캐시는 공유)"""
    return VenueMatcher(repository, cache)


def _not_found(suggestions: Optional[list[VenueSuggestion]] = None) -> JSONResponse:
    body = VenueNotFoundResponse(
        message="Did you mean one of these venues?" if suggestions else NOT_FOUND_MESSAGE,
        suggestions=suggestions or [],
    )
    return JSONResponse(status_code=404, content=body.model_dump())


def _suggestion_items(outcome: MatchOutcome) -> list[VenueSuggestion]:
    items = []
    for scored in outcome.suggestions:
        path = scored.venue.canonical_path
        if not path:
            continue
        items.append(
            VenueSuggestion(
                name=scored.venue.name,
                link=f"{settings.public_base_url}{path}",
                confidence=round(scored.confidence, 4),
            )
        )
    return items


@router.get("/search", response_model=VenueSearchResponse)
def search_venues(
    q: str = Query(..., description="장소 이름 검색어"),
    limit: int = Query(20, ge=1, le=50),
    repository: VenueRepository = Depends(get_venue_repository),
):
    """장소 이름 부분 검색 API"""
    try:
        SecurityValidator.validate_query(q)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        venues = repository.search_by_name(q.strip(), limit=limit)
    except CatalogUnavailableException as e:
        raise HTTPException(status_code=503, detail=e.error_code)

    return VenueSearchResponse(
        query=q.strip(),
        count=len(venues),
        venues=[VenueSummary.from_venue(v) for v in venues],
    )


@router.get("/match/{slug}", response_model=MatchOutcome)
def match_venue(slug: str, matcher: VenueMatcher = Depends(get_venue_matcher)):
    """누락된 슬러그의 매칭 결과를 그대로 반환 (디버깅/도구용)"""
    try:
        SecurityValidator.validate_slug(slug)
    except InvalidSlugException as e:
        raise HTTPException(status_code=400, detail=e.message)

    try:
        return matcher.find_similar(slug)
    except CatalogUnavailableException as e:
        return JSONResponse(
            status_code=503,
            content={"status": "error", "error_code": e.error_code, "message": "Venue catalog unavailable"},
        )


@page_router.get("/{country_slug}/{city_slug}", response_model=CityResponse)
def show_city(
    country_slug: str,
    city_slug: str,
    repository: VenueRepository = Depends(get_venue_repository),
):
    """도시 페이지 (국가/도시 슬러그가 모두 맞아야 함, 퍼지 매칭 없음)"""
    try:
        country = repository.get_country_by_slug(country_slug)
        city = repository.get_city_by_slug(city_slug, country_id=country.id) if country else None
        if city is None:
            return _not_found()
        venues = repository.list_venues_for_city(city.id)
    except CatalogUnavailableException as e:
        logger.warning(f"[API] City lookup failed: {e.error_code}")
        return _not_found()

    return CityResponse(
        id=city.id,
        name=city.name,
        slug=city.slug,
        country_name=country.name,
        country_slug=country.slug,
        latitude=city.latitude,
        longitude=city.longitude,
        venue_count=len(venues),
        venues=[VenueSummary.from_venue(v) for v in venues],
    )


@page_router.get("/{country_slug}/{city_slug}/{venue_slug}")
def show_venue(
    country_slug: str,
    city_slug: str,
    venue_slug: str,
    repository: VenueRepository = Depends(get_venue_repository),
    matcher: VenueMatcher = Depends(get_venue_matcher),
):
    """장소 페이지 (V1 경로 패턴: /{country}/{city}/{venue})

    Flow:
        1. 슬러그 직접 조회 → 있으면 상세 (경로가 다르면 정식 경로로 301)
        2. 없으면 매처 실행
           - REDIRECT → 301
           - SUGGESTIONS → 404 + 추천 목록
           - NO_MATCH / 카탈로그 장애 → 404
    """
    try:
        SecurityValidator.validate_slug(venue_slug)
    except InvalidSlugException:
        return _not_found()

    requested_path = f"/{country_slug}/{city_slug}/{venue_slug}"

    try:
        venue = repository.get_by_slug(venue_slug)
    except CatalogUnavailableException as e:
        logger.warning(f"[API] Venue lookup failed: {e.error_code}")
        return _not_found()

    if venue is not None:
        summary = VenueSummary.from_venue(venue)
        if summary.canonical_path and summary.canonical_path != requested_path:
            return RedirectResponse(summary.canonical_path, status_code=301)
        return VenueResponse.from_venue(venue, settings.public_base_url)

    try:
        outcome = matcher.find_similar(venue_slug)
    except CatalogUnavailableException as e:
        # 사용자에게는 일반 404와 동일하게 보이되, 로그로는 구분
        logger.warning(
            f"[API] Could not match '{sanitize_for_log(venue_slug)}': {e.error_code}"
        )
        return _not_found()

    if outcome.is_redirect and outcome.venue is not None and outcome.venue.canonical_path:
        logger.info(
            f"[API] Redirecting '{sanitize_for_log(requested_path)}' -> '{outcome.venue.canonical_path}'"
        )
        return RedirectResponse(outcome.venue.canonical_path, status_code=301)

    if outcome.is_suggestions:
        return _not_found(_suggestion_items(outcome))

    return _not_found()
