"""데이터베이스 모델 (읽기 전용)

테이블은 외부 시스템(Eventasaurus)이 생성/갱신합니다.
여기서는 조회에 필요한 컬럼만 매핑합니다.
"""
from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, TIMESTAMP
from sqlalchemy.orm import relationship
from trivia_advisor.core.database import Base


class Country(Base):
    """국가 테이블"""

    __tablename__ = "countries"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)
    slug = Column(String, nullable=False, index=True)
    code = Column(String, nullable=True)
    inserted_at = Column(TIMESTAMP, nullable=True)
    updated_at = Column(TIMESTAMP, nullable=True)

    cities = relationship("City", back_populates="country")

    def __repr__(self) -> str:
        return f"<Country(id={self.id}, slug={self.slug})>"


class City(Base):
    """도시 테이블"""

    __tablename__ = "cities"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)
    slug = Column(String, nullable=False, index=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    discovery_enabled = Column(Boolean, default=False)
    country_id = Column(Integer, ForeignKey("countries.id"), nullable=False, index=True)
    inserted_at = Column(TIMESTAMP, nullable=True)
    updated_at = Column(TIMESTAMP, nullable=True)

    country = relationship("Country", back_populates="cities")
    venues = relationship("Venue", back_populates="city")

    def __repr__(self) -> str:
        return f"<City(id={self.id}, slug={self.slug})>"


class Venue(Base):
    """장소 테이블

    - slug: URL에 쓰이는 고유 문자열 (예: "albion-hotel")
    - latitude/longitude: 좌표 (없을 수 있음)
    """

    __tablename__ = "venues"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True, index=True)
    address = Column(String, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    venue_type = Column(String, nullable=True)
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=True, index=True)
    inserted_at = Column(TIMESTAMP, nullable=True)
    updated_at = Column(TIMESTAMP, nullable=True)

    city = relationship("City", back_populates="venues")

    def __repr__(self) -> str:
        return f"<Venue(id={self.id}, slug={self.slug})>"
