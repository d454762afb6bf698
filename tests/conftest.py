"""전역 테스트 설정

역할:
- 테스트 환경 구성 (인메모리 SQLite, 메모리 캐시)
- 공통 Fake 카탈로그 주입
- 전역 상태 초기화 (dependency override, 캐시 싱글톤)

금지:
- 외부 DB/Redis 접속
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pytest

# 앱 모듈이 import 시점에 설정/엔진을 만들므로 가장 먼저 설정
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["MATCH_CACHE_BACKEND"] = "memory"
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("LOG_LEVEL", "INFO")

# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from trivia_advisor.api.routes import venue_routes  # noqa: E402
from trivia_advisor.app import app  # noqa: E402
from trivia_advisor.core.database import Base, SessionLocal, engine  # noqa: E402
from trivia_advisor.repositories.models import City, Country, Venue  # noqa: E402
from tests.fixtures import CITIES, COUNTRIES, VENUES  # noqa: E402


# ============================================================================
# Fake 카탈로그 (DB 없이 매처 단위 테스트)
# ============================================================================

@dataclass
class FakeCountry:
    slug: str


@dataclass
class FakeCity:
    slug: str
    country: Optional[FakeCountry] = None


@dataclass
class FakeVenue:
    id: int
    name: str
    slug: str
    city: Optional[FakeCity] = None


def make_venue(venue_id: int, slug: str, city: str = "london", country: str = "united-kingdom") -> FakeVenue:
    return FakeVenue(
        id=venue_id,
        name=slug.replace("-", " ").title(),
        slug=slug,
        city=FakeCity(slug=city, country=FakeCountry(slug=country)),
    )


@dataclass
class FakeCatalog:
    """메모리 카탈로그

    - 대소문자 무시 부분 일치/접두사 조회
    - 호출 기록 (calls)
    - error가 설정되면 모든 조회에서 발생
    """

    venues: list[FakeVenue]
    calls: list[tuple[str, str]] = field(default_factory=list)
    error: Optional[Exception] = None

    def _record(self, method: str, arg: str) -> None:
        self.calls.append((method, arg))
        if self.error is not None:
            raise self.error

    def get_by_slug(self, slug: str) -> Optional[FakeVenue]:
        self._record("get_by_slug", slug)
        return next((v for v in self.venues if v.slug == slug), None)

    def find_by_slug_contains(self, fragment: str, limit: int = 20) -> list[FakeVenue]:
        self._record("find_by_slug_contains", fragment)
        needle = fragment.lower()
        return [v for v in self.venues if needle in v.slug.lower()][:limit]

    def find_by_slug_prefix(self, prefix: str, limit: int = 20) -> list[FakeVenue]:
        self._record("find_by_slug_prefix", prefix)
        needle = prefix.lower()
        return [v for v in self.venues if v.slug.lower().startswith(needle)][:limit]

    def find_calls(self) -> list[tuple[str, str]]:
        return [c for c in self.calls if c[0] != "get_by_slug"]


def _fake_venues() -> list[FakeVenue]:
    cities = {c[0]: c for c in CITIES}
    countries = {c[0]: c for c in COUNTRIES}
    venues = []
    for venue_id, name, slug, city_id in VENUES:
        _, _, city_slug, country_id = cities[city_id]
        venues.append(
            FakeVenue(
                id=venue_id,
                name=name,
                slug=slug,
                city=FakeCity(slug=city_slug, country=FakeCountry(slug=countries[country_id][2])),
            )
        )
    return venues


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    """fixtures.VENUES 기반 Fake 카탈로그"""
    return FakeCatalog(venues=_fake_venues())


# ============================================================================
# DB 픽스처 (인메모리 SQLite)
# ============================================================================

@pytest.fixture
def db_session():
    """테이블 생성 + 장소 카탈로그 시드 → 세션 제공 → 테이블 삭제"""
    Base.metadata.create_all(bind=engine)

    seed = SessionLocal()
    try:
        for country_id, name, slug, code in COUNTRIES:
            seed.add(Country(id=country_id, name=name, slug=slug, code=code))
        for city_id, name, slug, country_id in CITIES:
            seed.add(City(id=city_id, name=name, slug=slug, country_id=country_id))
        for venue_id, name, slug, city_id in VENUES:
            seed.add(Venue(id=venue_id, name=name, slug=slug, city_id=city_id))
        seed.commit()
    finally:
        seed.close()

    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()
        Base.metadata.drop_all(bind=engine)


# ============================================================================
# 전역 상태 초기화
# ============================================================================

@pytest.fixture(autouse=True)
def reset_app_state() -> Any:
    """테스트 간 dependency override/매칭 캐시 싱글톤 초기화"""
    app.dependency_overrides.clear()
    venue_routes._match_cache = None
    yield
    app.dependency_overrides.clear()
    venue_routes._match_cache = None


@pytest.fixture
def catalog_factory():
    """슬러그 목록으로 Fake 카탈로그 생성 (id는 1부터, 모두 /united-kingdom/london)"""

    def _factory(*slugs: str) -> FakeCatalog:
        return FakeCatalog(venues=[make_venue(i, slug) for i, slug in enumerate(slugs, start=1)])

    return _factory
