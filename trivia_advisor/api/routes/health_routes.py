"""헬스 체크 엔드포인트"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from datetime import datetime, timezone

from trivia_advisor.api.routes.venue_routes import get_match_cache
from trivia_advisor.core.database import check_db
from trivia_advisor.core.logging import logger
from trivia_advisor.engine import MatchCacheAdapter
from trivia_advisor.schemas.venue_schema import HealthResponse
from trivia_advisor import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(cache: MatchCacheAdapter = Depends(get_match_cache)):
    """
    헬스 체크 엔드포인트 (로드밸런서/모니터링용)

    - DB 연결 상태 (SELECT 1) → 실패 시 503
    - 캐시 상태 (장애여도 서비스는 동작하므로 상태만 보고)
    """
    db_ok = check_db()

    try:
        cache_ok = cache.cache_service.health_check()
    except Exception as e:
        logger.error(f"Unexpected cache error: {e}")
        cache_ok = False

    body = HealthResponse(
        status="healthy" if db_ok else "unhealthy",
        database="connected" if db_ok else "disconnected",
        cache="ok" if cache_ok else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
    )
    return JSONResponse(status_code=200 if db_ok else 503, content=body.model_dump(mode="json"))


@router.get("/")
def root():
    """루트 엔드포인트"""
    return {
        "service": "Trivia Advisor",
        "version": __version__,
        "docs": "/docs"
    }
