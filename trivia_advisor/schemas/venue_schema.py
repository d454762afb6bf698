"""Pydantic 스키마 정의"""
from typing import Any, List, Optional
from pydantic import BaseModel, Field, computed_field
from datetime import datetime


class VenueSummary(BaseModel):
    """장소 요약 (ORM 세션과 분리된 스냅샷, 캐시/응답용)"""
    id: int = Field(..., description="장소 ID")
    name: str = Field(..., description="장소명")
    slug: str = Field(..., description="장소 슬러그")
    city_slug: Optional[str] = Field(None, description="도시 슬러그")
    country_slug: Optional[str] = Field(None, description="국가 슬러그")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def canonical_path(self) -> Optional[str]:
        """/{country}/{city}/{venue} 형태의 정식 경로 (도시/국가 정보가 없으면 None)"""
        if not self.city_slug or not self.country_slug:
            return None
        return f"/{self.country_slug}/{self.city_slug}/{self.slug}"

    @classmethod
    def from_venue(cls, venue: Any) -> "VenueSummary":
        """ORM Venue (city/country 관계 로드됨) -> VenueSummary"""
        city = getattr(venue, "city", None)
        country = getattr(city, "country", None) if city is not None else None
        return cls(
            id=venue.id,
            name=venue.name,
            slug=venue.slug,
            city_slug=getattr(city, "slug", None),
            country_slug=getattr(country, "slug", None),
        )


class ScoredVenue(BaseModel):
    """신뢰도가 붙은 후보 장소"""
    venue: VenueSummary
    confidence: float = Field(..., ge=0.0, le=1.0, description="매칭 신뢰도")


class VenueResponse(BaseModel):
    """장소 상세 응답"""
    id: int
    name: str
    slug: str
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    venue_type: Optional[str] = None
    city_name: Optional[str] = None
    city_slug: Optional[str] = None
    country_name: Optional[str] = None
    country_slug: Optional[str] = None
    canonical_url: Optional[str] = Field(None, description="정식 URL")

    @classmethod
    def from_venue(cls, venue: Any, base_url: str) -> "VenueResponse":
        summary = VenueSummary.from_venue(venue)
        city = venue.city
        country = city.country if city is not None else None
        return cls(
            id=venue.id,
            name=venue.name,
            slug=venue.slug,
            address=venue.address,
            latitude=venue.latitude,
            longitude=venue.longitude,
            venue_type=venue.venue_type,
            city_name=city.name if city is not None else None,
            city_slug=summary.city_slug,
            country_name=country.name if country is not None else None,
            country_slug=summary.country_slug,
            canonical_url=f"{base_url}{summary.canonical_path}" if summary.canonical_path else None,
        )


class VenueSuggestion(BaseModel):
    """'혹시 이 장소를 찾으셨나요?' 항목"""
    name: str
    link: str
    confidence: float


class VenueNotFoundResponse(BaseModel):
    """장소 미발견 응답 (추천 목록은 없을 수 있음)"""
    status: str = "not_found"
    message: str
    suggestions: List[VenueSuggestion] = Field(default_factory=list)


class VenueSearchResponse(BaseModel):
    """장소 이름 검색 응답"""
    query: str
    count: int
    venues: List[VenueSummary]


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    database: str
    cache: str
    timestamp: datetime
    version: str


class CityResponse(BaseModel):
    """도시 페이지 응답 (도시 정보 + 장소 목록)"""
    id: int
    name: str
    slug: str
    country_name: str
    country_slug: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    venue_count: int
    venues: List[VenueSummary]
