"""FastAPI 앱 팩토리"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from trivia_advisor.core.config import settings
from trivia_advisor.core.database import check_db
from trivia_advisor.core.logging import logger
from trivia_advisor.api import health_router, venue_router, page_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info("Starting application...")
    # 읽기 전용 서비스: 테이블 생성/마이그레이션 없이 연결만 확인
    if not check_db():
        logger.warning("Database not reachable at startup; venue pages will return 404 until it recovers")
    logger.info(f"Application started (match cache: {settings.match_cache_backend})")
    yield
    logger.info("Shutting down application...")


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )

    # CORS (읽기 전용 GET만 허용)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # 라우터 등록 (장소 페이지 catch-all 경로는 마지막)
    app.include_router(health_router)
    app.include_router(venue_router)
    app.include_router(page_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
