"""장소 카탈로그 리포지토리 - 외부 DB 읽기 전용 조회."""

from __future__ import annotations

from typing import Callable, List, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from trivia_advisor.core.exceptions import CatalogUnavailableException
from trivia_advisor.core.logging import logger
from trivia_advisor.repositories.models import City, Country, Venue

T = TypeVar("T")

# LIKE 패턴 이스케이프 문자
LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """LIKE 와일드카드(%, _)를 리터럴로 취급하도록 이스케이프."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class VenueRepository:
    """장소/도시/국가 데이터 액세스 레이어

    모든 메서드는 조회만 수행합니다. 인프라 오류(연결 끊김, 타임아웃 등)는
    CatalogUnavailableException으로 변환되어 '결과 없음'과 구분됩니다.
    """

    def __init__(self, db: Session):
        self.db = db

    def _run(self, operation: str, query: Callable[[], T]) -> T:
        try:
            return query()
        except SQLAlchemyError as e:
            logger.error(f"Venue catalog query failed ({operation}): {type(e).__name__}: {e}")
            raise CatalogUnavailableException(operation, type(e).__name__)

    def _venues(self):
        return self.db.query(Venue).options(
            joinedload(Venue.city).joinedload(City.country)
        )

    def get_by_slug(self, slug: str) -> Optional[Venue]:
        """슬러그가 정확히 일치하는 장소 (없으면 None)"""
        if not slug:
            return None
        return self._run(
            "get_by_slug",
            lambda: self._venues().filter(Venue.slug == slug).first(),
        )

    def find_by_slug_contains(self, fragment: str, limit: int = 20) -> List[Venue]:
        """슬러그에 fragment가 포함된 장소 (대소문자 무시)"""
        if not fragment:
            return []
        pattern = f"%{escape_like(fragment)}%"
        return self._run(
            "find_by_slug_contains",
            lambda: self._venues()
            .filter(Venue.slug.ilike(pattern, escape=LIKE_ESCAPE))
            .order_by(Venue.id)
            .limit(limit)
            .all(),
        )

    def find_by_slug_prefix(self, prefix: str, limit: int = 20) -> List[Venue]:
        """슬러그가 prefix로 시작하는 장소 (대소문자 무시)"""
        if not prefix:
            return []
        pattern = f"{escape_like(prefix)}%"
        return self._run(
            "find_by_slug_prefix",
            lambda: self._venues()
            .filter(Venue.slug.ilike(pattern, escape=LIKE_ESCAPE))
            .order_by(Venue.id)
            .limit(limit)
            .all(),
        )

    def search_by_name(self, query: str, limit: int = 20) -> List[Venue]:
        """장소 이름 부분 검색 (이름순)"""
        query = (query or "").strip()
        if not query:
            return []
        pattern = f"%{escape_like(query)}%"
        return self._run(
            "search_by_name",
            lambda: self._venues()
            .filter(Venue.name.ilike(pattern, escape=LIKE_ESCAPE))
            .order_by(Venue.name)
            .limit(limit)
            .all(),
        )

    def list_venues_for_city(self, city_id: int, limit: int = 100) -> List[Venue]:
        """도시에 속한 장소 목록 (이름순)"""
        return self._run(
            "list_venues_for_city",
            lambda: self._venues()
            .filter(Venue.city_id == city_id)
            .order_by(Venue.name)
            .limit(limit)
            .all(),
        )

    def get_country_by_slug(self, slug: str) -> Optional[Country]:
        """국가 슬러그 조회"""
        return self._run(
            "get_country_by_slug",
            lambda: self.db.query(Country).filter(Country.slug == slug).first(),
        )

    def get_city_by_slug(self, slug: str, country_id: Optional[int] = None) -> Optional[City]:
        """도시 슬러그 조회 (국가로 범위 제한 가능)"""

        def _query() -> Optional[City]:
            q = self.db.query(City).options(joinedload(City.country)).filter(City.slug == slug)
            if country_id is not None:
                q = q.filter(City.country_id == country_id)
            return q.first()

        return self._run("get_city_by_slug", _query)
