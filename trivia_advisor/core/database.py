"""데이터베이스 연결 및 세션 관리 (읽기 전용)

장소/도시/국가 데이터는 외부 시스템(Eventasaurus)이 소유합니다.
이 서비스는 조회만 하며, 세션은 커밋 없이 항상 롤백 후 닫습니다.
"""
from typing import Any, Dict, Generator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from contextlib import contextmanager

from trivia_advisor.core.config import settings
from trivia_advisor.core.logging import logger

# SQLAlchemy Base
Base = declarative_base()


def _engine_kwargs(database_url: str) -> Dict[str, Any]:
    """DB 종류별 엔진 옵션"""
    if database_url.startswith("sqlite"):
        # 테스트/로컬용: 스레드풀(FastAPI sync 엔드포인트)에서도 같은 연결 공유
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }

    kwargs: Dict[str, Any] = {
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
    }
    if settings.database_statement_timeout_ms and database_url.startswith("postgresql"):
        # 느린 쿼리가 요청을 붙잡지 않도록 서버 측 타임아웃
        kwargs["connect_args"] = {
            "options": f"-c statement_timeout={settings.database_statement_timeout_ms}"
        }
    return kwargs


engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_db() -> bool:
    """DB 연결 확인 (SELECT 1)"""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection error: {type(e).__name__}: {e}")
        return False


def get_db() -> Generator[Session, None, None]:
    """FastAPI Dependency: DB 세션 제공"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """Context Manager: DB 세션 제공 (읽기 전용, 커밋하지 않음)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()
