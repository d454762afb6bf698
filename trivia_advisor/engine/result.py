"""Match Outcome - Standardized Result Format

장소 슬러그 매칭의 세 가지 결과(리다이렉트/추천/미발견)를 표현합니다.
Redis 캐시에 JSON으로 저장할 수 있도록 pydantic 모델로 정의합니다.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from trivia_advisor.schemas.venue_schema import ScoredVenue, VenueSummary

# 신뢰도 임계값
REDIRECT_THRESHOLD = 0.90
SUGGESTION_THRESHOLD = 0.70
MAX_SUGGESTIONS = 5


class MatchKind(str, Enum):
    """매칭 결과 종류"""

    REDIRECT = "redirect"  # 단일 고신뢰 후보로 바로 이동
    SUGGESTIONS = "suggestions"  # "혹시 이 장소?" 목록
    NO_MATCH = "no_match"  # 후보 없음


class MatchOutcome(BaseModel):
    """매칭 결과 표준 포맷

    Attributes:
        kind: 결과 종류
        venue: REDIRECT 대상 장소
        confidence: REDIRECT 신뢰도
        suggestions: SUGGESTIONS 후보 (신뢰도 내림차순, 최대 5개)
    """

    kind: MatchKind
    venue: Optional[VenueSummary] = None
    confidence: Optional[float] = Field(None, ge=0.0, le=1.0)
    suggestions: List[ScoredVenue] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_invariants(self) -> "MatchOutcome":
        if self.kind is MatchKind.REDIRECT:
            if self.venue is None or self.confidence is None:
                raise ValueError("redirect requires venue and confidence")
            if self.confidence < REDIRECT_THRESHOLD:
                raise ValueError(f"redirect confidence below {REDIRECT_THRESHOLD}")
        elif self.kind is MatchKind.SUGGESTIONS:
            if not 1 <= len(self.suggestions) <= MAX_SUGGESTIONS:
                raise ValueError(f"suggestions must hold 1..{MAX_SUGGESTIONS} entries")
            scores = [s.confidence for s in self.suggestions]
            if min(scores) < SUGGESTION_THRESHOLD:
                raise ValueError(f"suggestion confidence below {SUGGESTION_THRESHOLD}")
            if any(a < b for a, b in zip(scores, scores[1:])):
                raise ValueError("suggestions must be sorted by confidence, descending")
        return self

    @property
    def is_redirect(self) -> bool:
        return self.kind is MatchKind.REDIRECT

    @property
    def is_suggestions(self) -> bool:
        return self.kind is MatchKind.SUGGESTIONS

    @property
    def is_no_match(self) -> bool:
        return self.kind is MatchKind.NO_MATCH

    @classmethod
    def redirect(cls, venue: VenueSummary, confidence: float) -> "MatchOutcome":
        """리다이렉트 결과 생성"""
        return cls(kind=MatchKind.REDIRECT, venue=venue, confidence=confidence)

    @classmethod
    def suggest(cls, candidates: List[ScoredVenue]) -> "MatchOutcome":
        """추천 결과 생성 (이미 정렬된 후보에서 상위 MAX_SUGGESTIONS개)"""
        return cls(kind=MatchKind.SUGGESTIONS, suggestions=candidates[:MAX_SUGGESTIONS])

    @classmethod
    def no_match(cls) -> "MatchOutcome":
        """미발견 결과 생성"""
        return cls(kind=MatchKind.NO_MATCH)
